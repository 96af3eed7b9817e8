from medibloc.schemas.common import CamelModel


class DashboardStats(CamelModel):
    users: int
    patients: int
    doctors: int
    appointments: int
    upcoming_appointments: int
    recent_prescriptions: int


class AppointmentStats(CamelModel):
    total: int
    by_status: dict[str, int]


class DiseaseStats(CamelModel):
    total: int
    chronic: int
    with_symptoms: int


class PatientStats(CamelModel):
    total: int
    by_gender: dict[str, int]
