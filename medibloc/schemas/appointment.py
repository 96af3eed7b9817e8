from datetime import datetime

from medibloc.schemas.common import CamelModel


class AppointmentCreate(CamelModel):
    patient_id: int
    doctor_id: int
    scheduled_at: datetime
    reason: str | None = None
    notes: str | None = None


class AppointmentUpdate(CamelModel):
    scheduled_at: datetime | None = None
    reason: str | None = None
    notes: str | None = None
    status: str | None = None


class AppointmentOut(CamelModel):
    id: int
    patient_id: int
    doctor_id: int
    scheduled_at: datetime
    reason: str | None
    notes: str | None
    status: str
    created_at: datetime
    updated_at: datetime
