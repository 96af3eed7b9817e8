from fastapi import APIRouter, Depends

from medibloc.api.deps import get_controllers
from medibloc.controllers.resources import Controllers
from medibloc.core import validation_schemas as schemas
from medibloc.core.rbac import STAFF, require_roles
from medibloc.core.request_validation import validate_request
from medibloc.core.security import get_current_user

router = APIRouter(prefix="/patient-diseases", tags=["patient-diseases"], dependencies=[Depends(get_current_user)])

staff_only = [Depends(require_roles(*STAFF))]


@router.get("")
async def list_patient_diseases(
    page: str | None = None,
    limit: str | None = None,
    c: Controllers = Depends(get_controllers),
):
    return (await c.patient_diseases.list(page, limit)).to_response()


@router.get("/{diagnosis_id}")
async def get_patient_disease(diagnosis_id: str, c: Controllers = Depends(get_controllers)):
    return (await c.patient_diseases.get_one(diagnosis_id)).to_response()


@router.post("", dependencies=staff_only)
async def create_patient_disease(
    payload: dict = Depends(validate_request(schemas.CREATE_PATIENT_DISEASE)),
    c: Controllers = Depends(get_controllers),
):
    return (await c.patient_diseases.create(payload)).to_response()


@router.put("/{diagnosis_id}", dependencies=staff_only)
async def update_patient_disease(
    diagnosis_id: str,
    payload: dict = Depends(validate_request(schemas.UPDATE_PATIENT_DISEASE)),
    c: Controllers = Depends(get_controllers),
):
    return (await c.patient_diseases.update(diagnosis_id, payload)).to_response()


@router.delete("/{diagnosis_id}", dependencies=staff_only)
async def delete_patient_disease(diagnosis_id: str, c: Controllers = Depends(get_controllers)):
    return (await c.patient_diseases.delete(diagnosis_id)).to_response()
