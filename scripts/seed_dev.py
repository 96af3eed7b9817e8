# seed_dev.py
from sqlalchemy.orm import Session

from medibloc.core.passwords import hash_password
from medibloc.db.session import SessionLocal
from medibloc.models.country import Country
from medibloc.models.disease import Disease
from medibloc.models.doctor import Doctor
from medibloc.models.patient import Patient
from medibloc.models.symptom import Symptom
from medibloc.models.user import User

DEV_PASSWORD = "changeme"

COUNTRIES = [
    ("France", "FR"),
    ("Belgium", "BE"),
    ("Switzerland", "CH"),
    ("Canada", "CA"),
]

SYMPTOMS = ["Fever", "Cough", "Headache", "Fatigue", "Shortness of breath"]

# name -> (flags, symptom names)
DISEASES = {
    "Influenza": ({"is_viral": True}, ["Fever", "Cough", "Fatigue"]),
    "Asthma": ({"is_chronic": True}, ["Cough", "Shortness of breath"]),
    "Migraine": ({"is_chronic": True}, ["Headache"]),
}


# ---------- helpers ----------

def get_or_create_user(db: Session, email: str, first_name: str, last_name: str, role: str) -> User:
    u = db.query(User).filter(User.email == email).one_or_none()
    if u:
        # keep these up to date in dev
        if u.role != role or not u.is_active:
            u.role = role
            u.is_active = True
            db.commit()
            db.refresh(u)
        return u

    u = User(
        email=email,
        password_hash=hash_password(DEV_PASSWORD),
        first_name=first_name,
        last_name=last_name,
        role=role,
        is_active=True,
    )
    db.add(u)
    db.commit()
    db.refresh(u)
    return u


def ensure_profile(db: Session, model, user: User, **fields):
    row = db.query(model).filter(model.user_id == user.id).one_or_none()
    if row:
        return row
    row = model(user_id=user.id, **fields)
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


def get_or_create_by_name(db: Session, model, name: str, **fields):
    row = db.query(model).filter(model.name == name).one_or_none()
    if row:
        return row
    row = model(name=name, **fields)
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


def main():
    db = SessionLocal()
    try:
        admin = get_or_create_user(db, "admin@medibloc.test", "Ada", "Admin", "ADMIN")
        doctor_user = get_or_create_user(db, "doctor@medibloc.test", "Gregory", "House", "DOCTOR")
        patient_user = get_or_create_user(db, "patient@medibloc.test", "John", "Doe", "PATIENT")

        doctor = ensure_profile(db, Doctor, doctor_user, specialty="Diagnostics")
        patient = ensure_profile(db, Patient, patient_user, gender="MALE")

        for name, code in COUNTRIES:
            get_or_create_by_name(db, Country, name, code=code)

        symptoms = {name: get_or_create_by_name(db, Symptom, name) for name in SYMPTOMS}
        for name, (flags, symptom_names) in DISEASES.items():
            disease = get_or_create_by_name(db, Disease, name, **flags)
            for s in symptom_names:
                if symptoms[s] not in disease.symptoms:
                    disease.symptoms.append(symptoms[s])
            db.commit()

        print("\n=== DEV SEED COMPLETE ===")
        print(f"Users (password: {DEV_PASSWORD}):")
        print(f"  admin:   {admin.email}")
        print(f"  doctor:  {doctor_user.email} (doctor_id={doctor.id})")
        print(f"  patient: {patient_user.email} (patient_id={patient.id})")
        print(f"\nCatalog: {len(COUNTRIES)} countries, {len(SYMPTOMS)} symptoms, {len(DISEASES)} diseases")

        print("\nTry it:")
        print("  curl -H 'X-User-Email: admin@medibloc.test' http://localhost:8000/api/v1/diseases")

    finally:
        db.close()


if __name__ == "__main__":
    main()
