from datetime import datetime, timedelta, timezone

from sqlalchemy.orm import Session

from medibloc.models.appointment import Appointment
from medibloc.models.country import Country
from medibloc.models.disease import Disease
from medibloc.models.doctor import Doctor
from medibloc.models.medicine import Medicine
from medibloc.models.patient import Patient
from medibloc.models.pharmacy import Pharmacy
from medibloc.models.symptom import Symptom
from medibloc.models.user import User

API = "/api/v1"

# not a real hash; these users never log in with a password
DUMMY_HASH = "pbkdf2_sha256$1$salt$00"


def auth(user: User) -> dict[str, str]:
    return {"X-User-Email": user.email}


def _save(db: Session, obj):
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return obj


def create_user(db: Session, email: str, role="PATIENT", first_name="Test", last_name="User", is_active=True) -> User:
    return _save(db, User(
        email=email,
        password_hash=DUMMY_HASH,
        first_name=first_name,
        last_name=last_name,
        role=role,
        is_active=is_active,
    ))


def create_patient(db: Session, email: str, gender: str | None = None, **fields) -> Patient:
    user = create_user(db, email, role="PATIENT")
    return _save(db, Patient(user_id=user.id, gender=gender, **fields))


def create_doctor(db: Session, email: str, specialty: str | None = None) -> Doctor:
    user = create_user(db, email, role="DOCTOR")
    return _save(db, Doctor(user_id=user.id, specialty=specialty))


def create_appointment(db: Session, patient: Patient, doctor: Doctor, in_days: int = 7, status="SCHEDULED") -> Appointment:
    return _save(db, Appointment(
        patient_id=patient.id,
        doctor_id=doctor.id,
        scheduled_at=datetime.now(timezone.utc) + timedelta(days=in_days),
        status=status,
    ))


def create_disease(db: Session, name: str, **flags) -> Disease:
    return _save(db, Disease(name=name, **flags))


def create_symptom(db: Session, name: str) -> Symptom:
    return _save(db, Symptom(name=name))


def create_country(db: Session, name="France", code="FR") -> Country:
    return _save(db, Country(name=name, code=code))


def create_pharmacy(db: Session, country: Country, name="Central Pharmacy") -> Pharmacy:
    return _save(db, Pharmacy(name=name, address="1 Main St", city="Paris", country_id=country.id))


def create_medicine(db: Session, name: str, type="TABLET", pharmacy: Pharmacy | None = None) -> Medicine:
    return _save(db, Medicine(
        name=name,
        type=type,
        common_names=[],
        side_effects=[],
        contraindications=[],
        pharmacy_id=pharmacy.id if pharmacy else None,
    ))
