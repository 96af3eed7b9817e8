"""Wire models for what doctors write: prescriptions and medical records."""
from datetime import datetime

from medibloc.schemas.common import CamelModel


class PrescriptionCreate(CamelModel):
    doctor_id: int
    patient_id: int
    medications: str
    diagnosis: str | None = None
    notes: str | None = None


class PrescriptionUpdate(CamelModel):
    medications: str | None = None
    diagnosis: str | None = None
    notes: str | None = None


class PrescriptionOut(CamelModel):
    id: int
    doctor_id: int
    patient_id: int
    medications: str
    diagnosis: str | None
    notes: str | None
    issued_at: datetime


class MedicalRecordCreate(CamelModel):
    patient_id: int
    title: str
    content: str
    files: list[str] = []


class MedicalRecordUpdate(CamelModel):
    title: str | None = None
    content: str | None = None
    files: list[str] | None = None


class MedicalRecordOut(CamelModel):
    id: int
    patient_id: int
    title: str
    content: str
    files: list[str]
    created_at: datetime


class PatientDiseaseCreate(CamelModel):
    patient_id: int
    disease_id: int
    status: str = "ACTIVE"
    severity: str = "MILD"
    notes: str | None = None


class PatientDiseaseUpdate(CamelModel):
    status: str | None = None
    severity: str | None = None
    notes: str | None = None


class PatientDiseaseOut(CamelModel):
    id: int
    patient_id: int
    disease_id: int
    diagnosed_at: datetime
    status: str
    severity: str
    notes: str | None
    created_at: datetime
    updated_at: datetime
