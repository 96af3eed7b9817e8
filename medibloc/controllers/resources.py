"""
Resource controllers: the generic CRUD set plus the few custom queries each
resource needs. Built once at startup by ``build_controllers`` and handed to
the routers through ``app.state``.
"""
from typing import Any

from sqlalchemy.orm import sessionmaker

from medibloc.controllers.generic import INVALID_ID, NOT_FOUND, ApiResult, GenericController
from medibloc.core.pagination import parse_identifier
from medibloc.core.repository import SqlAlchemyRepository
from medibloc.models import (
    Appointment,
    Country,
    Disease,
    Doctor,
    MedicalRecord,
    Medicine,
    Patient,
    PatientDisease,
    Pharmacy,
    Prescription,
    Symptom,
)
from medibloc.repositories.catalog import DiseaseRepository, SymptomRepository
from medibloc.repositories.people import DoctorRepository, PatientRepository
from medibloc.schemas.appointment import AppointmentCreate, AppointmentOut, AppointmentUpdate
from medibloc.schemas.catalog import (
    CountryCreate,
    CountryOut,
    CountryUpdate,
    DiseaseCreate,
    DiseaseOut,
    DiseaseUpdate,
    SymptomCreate,
    SymptomOut,
    SymptomUpdate,
)
from medibloc.schemas.clinical import (
    MedicalRecordCreate,
    MedicalRecordOut,
    MedicalRecordUpdate,
    PatientDiseaseCreate,
    PatientDiseaseOut,
    PatientDiseaseUpdate,
    PrescriptionCreate,
    PrescriptionOut,
    PrescriptionUpdate,
)
from medibloc.schemas.doctor import DoctorCreate, DoctorOut, DoctorUpdate
from medibloc.schemas.patient import PatientCreate, PatientOut, PatientUpdate
from medibloc.schemas.pharmacy import (
    MedicineCreate,
    MedicineOut,
    MedicineUpdate,
    PharmacyCreate,
    PharmacyOut,
    PharmacyUpdate,
)


class DoctorController(GenericController):
    repo: DoctorRepository

    async def specialties(self) -> ApiResult:
        try:
            names = await self.repo.specialties()
        except Exception as exc:
            return self.repository_failure(exc, "specialties")
        return ApiResult.success(names)


class DiseaseController(GenericController):
    repo: DiseaseRepository

    async def symptoms(self, raw_id: Any) -> ApiResult:
        return await self.run_for_id(raw_id, self.repo.symptoms_of, operation="symptoms")

    async def link_symptom(self, raw_id: Any, raw_symptom_id: Any, *, attach: bool) -> ApiResult:
        disease_id = parse_identifier(raw_id)
        symptom_id = parse_identifier(raw_symptom_id)
        if disease_id is None or symptom_id is None:
            return ApiResult.failure(400, INVALID_ID)

        call = self.repo.add_symptom if attach else self.repo.remove_symptom
        try:
            disease = await call(disease_id, symptom_id)
        except Exception as exc:
            return self.repository_failure(exc, "link_symptom")
        if disease is None:
            return ApiResult.failure(404, NOT_FOUND)
        return ApiResult.success(disease, message="symptom linked" if attach else "symptom unlinked")


class SymptomController(GenericController):
    repo: SymptomRepository

    async def diseases(self, raw_id: Any) -> ApiResult:
        return await self.run_for_id(raw_id, self.repo.diseases_of, operation="diseases")


class Controllers:
    """One controller per resource, sharing nothing but the session factory."""

    def __init__(self, session_factory: sessionmaker, *, expose_errors: bool | None = None):
        def repo(cls, model, out_schema, create_schema, update_schema, **kw):
            return cls(
                model=model,
                out_schema=out_schema,
                create_schema=create_schema,
                update_schema=update_schema,
                session_factory=session_factory,
                **kw,
            )

        opts = {"expose_errors": expose_errors}

        self.patients = GenericController(
            repo(PatientRepository, Patient, PatientOut, PatientCreate, PatientUpdate),
            resource="patient", **opts,
        )
        self.doctors = DoctorController(
            repo(DoctorRepository, Doctor, DoctorOut, DoctorCreate, DoctorUpdate),
            resource="doctor", **opts,
        )
        self.appointments = GenericController(
            repo(SqlAlchemyRepository, Appointment, AppointmentOut, AppointmentCreate, AppointmentUpdate,
                 order_by="scheduled_at"),
            resource="appointment", **opts,
        )
        self.diseases = DiseaseController(
            repo(DiseaseRepository, Disease, DiseaseOut, DiseaseCreate, DiseaseUpdate, order_by="name"),
            resource="disease", **opts,
        )
        self.symptoms = SymptomController(
            repo(SymptomRepository, Symptom, SymptomOut, SymptomCreate, SymptomUpdate, order_by="name"),
            resource="symptom", **opts,
        )
        self.medicines = GenericController(
            repo(SqlAlchemyRepository, Medicine, MedicineOut, MedicineCreate, MedicineUpdate, order_by="name"),
            resource="medicine", **opts,
        )
        self.pharmacies = GenericController(
            repo(SqlAlchemyRepository, Pharmacy, PharmacyOut, PharmacyCreate, PharmacyUpdate, order_by="name"),
            resource="pharmacy", **opts,
        )
        self.countries = GenericController(
            repo(SqlAlchemyRepository, Country, CountryOut, CountryCreate, CountryUpdate, order_by="name"),
            resource="country", **opts,
        )
        self.prescriptions = GenericController(
            repo(SqlAlchemyRepository, Prescription, PrescriptionOut, PrescriptionCreate, PrescriptionUpdate,
                 order_by="issued_at"),
            resource="prescription", **opts,
        )
        self.medical_records = GenericController(
            repo(SqlAlchemyRepository, MedicalRecord, MedicalRecordOut, MedicalRecordCreate, MedicalRecordUpdate,
                 order_by="created_at"),
            resource="medical_record", **opts,
        )
        self.patient_diseases = GenericController(
            repo(SqlAlchemyRepository, PatientDisease, PatientDiseaseOut, PatientDiseaseCreate,
                 PatientDiseaseUpdate, order_by="diagnosed_at"),
            resource="patient_disease", **opts,
        )


def build_controllers(session_factory: sessionmaker, *, expose_errors: bool | None = None) -> Controllers:
    return Controllers(session_factory, expose_errors=expose_errors)
