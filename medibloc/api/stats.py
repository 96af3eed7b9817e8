from datetime import timedelta

from fastapi import APIRouter, Depends
from sqlalchemy import func
from sqlalchemy.orm import Session

from medibloc.controllers.generic import ApiResult
from medibloc.core.rbac import STAFF, require_roles
from medibloc.db.base import utcnow
from medibloc.db.session import get_db
from medibloc.models import Appointment, Disease, Doctor, Patient, Prescription, User, disease_symptoms
from medibloc.schemas.stats import AppointmentStats, DashboardStats, DiseaseStats, PatientStats

router = APIRouter(prefix="/stats", tags=["stats"], dependencies=[Depends(require_roles(*STAFF))])

RECENT_DAYS = 30
OPEN_STATUSES = ("SCHEDULED", "CONFIRMED")


def _grouped(db: Session, column) -> dict[str, int]:
    rows = db.query(column, func.count()).group_by(column).all()
    return {key if key is not None else "UNKNOWN": count for key, count in rows}


@router.get("/dashboard")
def dashboard_stats(db: Session = Depends(get_db)):
    now = utcnow()
    stats = DashboardStats(
        users=db.query(func.count(User.id)).scalar() or 0,
        patients=db.query(func.count(Patient.id)).scalar() or 0,
        doctors=db.query(func.count(Doctor.id)).scalar() or 0,
        appointments=db.query(func.count(Appointment.id)).scalar() or 0,
        upcoming_appointments=(
            db.query(func.count(Appointment.id))
            .filter(Appointment.scheduled_at >= now, Appointment.status.in_(OPEN_STATUSES))
            .scalar()
            or 0
        ),
        recent_prescriptions=(
            db.query(func.count(Prescription.id))
            .filter(Prescription.issued_at >= now - timedelta(days=RECENT_DAYS))
            .scalar()
            or 0
        ),
    )
    return ApiResult.success(stats).to_response()


@router.get("/appointments")
def appointment_stats(db: Session = Depends(get_db)):
    by_status = _grouped(db, Appointment.status)
    stats = AppointmentStats(total=sum(by_status.values()), by_status=by_status)
    return ApiResult.success(stats).to_response()


@router.get("/patients")
def patient_stats(db: Session = Depends(get_db)):
    by_gender = _grouped(db, Patient.gender)
    stats = PatientStats(total=sum(by_gender.values()), by_gender=by_gender)
    return ApiResult.success(stats).to_response()


@router.get("/diseases")
def disease_stats(db: Session = Depends(get_db)):
    # diseases with at least one linked symptom
    with_symptoms = db.query(func.count(func.distinct(disease_symptoms.c.disease_id))).scalar() or 0
    stats = DiseaseStats(
        total=db.query(func.count(Disease.id)).scalar() or 0,
        chronic=db.query(func.count(Disease.id)).filter(Disease.is_chronic.is_(True)).scalar() or 0,
        with_symptoms=with_symptoms,
    )
    return ApiResult.success(stats).to_response()
