from fastapi import APIRouter, Depends

from medibloc.api.deps import get_controllers
from medibloc.controllers.resources import Controllers
from medibloc.core import validation_schemas as schemas
from medibloc.core.rbac import require_roles
from medibloc.core.request_validation import validate_request
from medibloc.core.security import get_current_user

router = APIRouter(prefix="/patients", tags=["patients"], dependencies=[Depends(get_current_user)])


@router.get("")
async def list_patients(
    page: str | None = None,
    limit: str | None = None,
    c: Controllers = Depends(get_controllers),
):
    return (await c.patients.list(page, limit)).to_response()


@router.get("/{patient_id}")
async def get_patient(patient_id: str, c: Controllers = Depends(get_controllers)):
    return (await c.patients.get_one(patient_id)).to_response()


@router.post("", dependencies=[Depends(require_roles("ADMIN"))])
async def create_patient(
    payload: dict = Depends(validate_request(schemas.CREATE_PATIENT)),
    c: Controllers = Depends(get_controllers),
):
    """Creates the user account and the patient profile together."""
    return (await c.patients.create(payload)).to_response()


@router.put("/{patient_id}", dependencies=[Depends(require_roles("DOCTOR", "ADMIN"))])
async def update_patient(
    patient_id: str,
    payload: dict = Depends(validate_request(schemas.UPDATE_PATIENT)),
    c: Controllers = Depends(get_controllers),
):
    return (await c.patients.update(patient_id, payload)).to_response()


@router.delete("/{patient_id}", dependencies=[Depends(require_roles("ADMIN"))])
async def delete_patient(patient_id: str, c: Controllers = Depends(get_controllers)):
    return (await c.patients.delete(patient_id)).to_response()


@router.get("/{patient_id}/appointments")
async def patient_appointments(patient_id: str, c: Controllers = Depends(get_controllers)):
    return (await c.appointments.list_related("patient_id", patient_id)).to_response()


@router.get("/{patient_id}/prescriptions")
async def patient_prescriptions(patient_id: str, c: Controllers = Depends(get_controllers)):
    return (await c.prescriptions.list_related("patient_id", patient_id)).to_response()


@router.get("/{patient_id}/medical-records")
async def patient_medical_records(patient_id: str, c: Controllers = Depends(get_controllers)):
    return (await c.medical_records.list_related("patient_id", patient_id)).to_response()


@router.get("/{patient_id}/diseases")
async def patient_diseases(patient_id: str, c: Controllers = Depends(get_controllers)):
    return (await c.patient_diseases.list_related("patient_id", patient_id)).to_response()
