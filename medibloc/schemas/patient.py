from datetime import date, datetime

from medibloc.schemas.common import CamelModel
from medibloc.schemas.user import UserOut


class PatientCreate(CamelModel):
    email: str
    password: str
    first_name: str
    last_name: str
    birth_date: date | None = None
    gender: str | None = None
    phone: str | None = None
    address: str | None = None


class PatientUpdate(CamelModel):
    first_name: str | None = None
    last_name: str | None = None
    birth_date: date | None = None
    gender: str | None = None
    phone: str | None = None
    address: str | None = None


class PatientOut(CamelModel):
    id: int
    user_id: int
    user: UserOut
    birth_date: date | None
    gender: str | None
    phone: str | None
    address: str | None
    created_at: datetime
    updated_at: datetime
