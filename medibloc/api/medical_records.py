from fastapi import APIRouter, Depends

from medibloc.api.deps import get_controllers
from medibloc.controllers.resources import Controllers
from medibloc.core import validation_schemas as schemas
from medibloc.core.rbac import STAFF, require_roles
from medibloc.core.request_validation import validate_request
from medibloc.core.security import get_current_user

router = APIRouter(prefix="/medical-records", tags=["medical-records"], dependencies=[Depends(get_current_user)])

staff_only = [Depends(require_roles(*STAFF))]


@router.get("")
async def list_medical_records(
    page: str | None = None,
    limit: str | None = None,
    c: Controllers = Depends(get_controllers),
):
    return (await c.medical_records.list(page, limit)).to_response()


@router.get("/patient/{patient_id}")
async def medical_records_for_patient(patient_id: str, c: Controllers = Depends(get_controllers)):
    return (await c.medical_records.list_related("patient_id", patient_id)).to_response()


@router.get("/{record_id}")
async def get_medical_record(record_id: str, c: Controllers = Depends(get_controllers)):
    return (await c.medical_records.get_one(record_id)).to_response()


@router.post("", dependencies=staff_only)
async def create_medical_record(
    payload: dict = Depends(validate_request(schemas.CREATE_MEDICAL_RECORD)),
    c: Controllers = Depends(get_controllers),
):
    return (await c.medical_records.create(payload)).to_response()


@router.put("/{record_id}", dependencies=staff_only)
async def update_medical_record(
    record_id: str,
    payload: dict = Depends(validate_request(schemas.UPDATE_MEDICAL_RECORD)),
    c: Controllers = Depends(get_controllers),
):
    return (await c.medical_records.update(record_id, payload)).to_response()


@router.delete("/{record_id}", dependencies=staff_only)
async def delete_medical_record(record_id: str, c: Controllers = Depends(get_controllers)):
    return (await c.medical_records.delete(record_id)).to_response()
