from fastapi import APIRouter, Depends

from medibloc.api.deps import get_controllers
from medibloc.controllers.resources import Controllers
from medibloc.core import validation_schemas as schemas
from medibloc.core.rbac import STAFF, require_roles
from medibloc.core.request_validation import validate_request
from medibloc.core.security import get_current_user

router = APIRouter(prefix="/appointments", tags=["appointments"], dependencies=[Depends(get_current_user)])


@router.get("")
async def list_appointments(
    page: str | None = None,
    limit: str | None = None,
    c: Controllers = Depends(get_controllers),
):
    return (await c.appointments.list(page, limit)).to_response()


@router.get("/patient/{patient_id}")
async def appointments_for_patient(patient_id: str, c: Controllers = Depends(get_controllers)):
    return (await c.appointments.list_related("patient_id", patient_id)).to_response()


@router.get("/doctor/{doctor_id}")
async def appointments_for_doctor(doctor_id: str, c: Controllers = Depends(get_controllers)):
    return (await c.appointments.list_related("doctor_id", doctor_id)).to_response()


@router.get("/{appointment_id}")
async def get_appointment(appointment_id: str, c: Controllers = Depends(get_controllers)):
    return (await c.appointments.get_one(appointment_id)).to_response()


@router.post("")
async def create_appointment(
    payload: dict = Depends(validate_request(schemas.CREATE_APPOINTMENT)),
    c: Controllers = Depends(get_controllers),
):
    return (await c.appointments.create(payload)).to_response()


@router.put("/{appointment_id}")
async def update_appointment(
    appointment_id: str,
    payload: dict = Depends(validate_request(schemas.UPDATE_APPOINTMENT)),
    c: Controllers = Depends(get_controllers),
):
    return (await c.appointments.update(appointment_id, payload)).to_response()


@router.patch("/{appointment_id}/status", dependencies=[Depends(require_roles(*STAFF))])
async def update_appointment_status(
    appointment_id: str,
    payload: dict = Depends(validate_request(schemas.UPDATE_APPOINTMENT_STATUS, sources=("body",))),
    c: Controllers = Depends(get_controllers),
):
    return (await c.appointments.update(appointment_id, {"status": payload["status"]})).to_response()


@router.delete("/{appointment_id}")
async def delete_appointment(appointment_id: str, c: Controllers = Depends(get_controllers)):
    return (await c.appointments.delete(appointment_id)).to_response()
