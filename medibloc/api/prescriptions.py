from fastapi import APIRouter, Depends

from medibloc.api.deps import get_controllers
from medibloc.controllers.resources import Controllers
from medibloc.core import validation_schemas as schemas
from medibloc.core.rbac import STAFF, require_roles
from medibloc.core.request_validation import validate_request
from medibloc.core.security import get_current_user

router = APIRouter(prefix="/prescriptions", tags=["prescriptions"], dependencies=[Depends(get_current_user)])


@router.get("")
async def list_prescriptions(
    page: str | None = None,
    limit: str | None = None,
    c: Controllers = Depends(get_controllers),
):
    return (await c.prescriptions.list(page, limit)).to_response()


@router.get("/patient/{patient_id}")
async def prescriptions_for_patient(patient_id: str, c: Controllers = Depends(get_controllers)):
    return (await c.prescriptions.list_related("patient_id", patient_id)).to_response()


@router.get("/doctor/{doctor_id}")
async def prescriptions_for_doctor(doctor_id: str, c: Controllers = Depends(get_controllers)):
    return (await c.prescriptions.list_related("doctor_id", doctor_id)).to_response()


@router.get("/{prescription_id}")
async def get_prescription(prescription_id: str, c: Controllers = Depends(get_controllers)):
    return (await c.prescriptions.get_one(prescription_id)).to_response()


@router.post("", dependencies=[Depends(require_roles(*STAFF))])
async def create_prescription(
    payload: dict = Depends(validate_request(schemas.CREATE_PRESCRIPTION)),
    c: Controllers = Depends(get_controllers),
):
    return (await c.prescriptions.create(payload)).to_response()


@router.delete("/{prescription_id}", dependencies=[Depends(require_roles("ADMIN"))])
async def delete_prescription(prescription_id: str, c: Controllers = Depends(get_controllers)):
    return (await c.prescriptions.delete(prescription_id)).to_response()
