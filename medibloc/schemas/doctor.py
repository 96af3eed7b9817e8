from datetime import datetime

from medibloc.schemas.common import CamelModel
from medibloc.schemas.user import UserOut


class DoctorCreate(CamelModel):
    email: str
    password: str
    first_name: str
    last_name: str
    specialty: str | None = None
    phone: str | None = None


class DoctorUpdate(CamelModel):
    first_name: str | None = None
    last_name: str | None = None
    specialty: str | None = None
    phone: str | None = None


class DoctorOut(CamelModel):
    id: int
    user_id: int
    user: UserOut
    specialty: str | None
    phone: str | None
    created_at: datetime
    updated_at: datetime
