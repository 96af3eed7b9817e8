from datetime import datetime

from medibloc.schemas.common import CamelModel


class UserOut(CamelModel):
    id: int
    email: str
    first_name: str
    last_name: str
    role: str
    is_active: bool
    created_at: datetime


class RegisterIn(CamelModel):
    email: str
    password: str
    first_name: str
    last_name: str
    role: str | None = None
