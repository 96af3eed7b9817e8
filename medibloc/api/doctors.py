from fastapi import APIRouter, Depends

from medibloc.api.deps import get_controllers
from medibloc.controllers.resources import Controllers
from medibloc.core import validation_schemas as schemas
from medibloc.core.rbac import require_roles
from medibloc.core.request_validation import validate_request
from medibloc.core.security import get_current_user

router = APIRouter(prefix="/doctors", tags=["doctors"], dependencies=[Depends(get_current_user)])


@router.get("")
async def list_doctors(
    page: str | None = None,
    limit: str | None = None,
    c: Controllers = Depends(get_controllers),
):
    return (await c.doctors.list(page, limit)).to_response()


@router.get("/specialties/list")
async def list_specialties(c: Controllers = Depends(get_controllers)):
    """Distinct specialties, for filter dropdowns."""
    return (await c.doctors.specialties()).to_response()


@router.get("/{doctor_id}")
async def get_doctor(doctor_id: str, c: Controllers = Depends(get_controllers)):
    return (await c.doctors.get_one(doctor_id)).to_response()


@router.post("", dependencies=[Depends(require_roles("ADMIN"))])
async def create_doctor(
    payload: dict = Depends(validate_request(schemas.CREATE_DOCTOR)),
    c: Controllers = Depends(get_controllers),
):
    return (await c.doctors.create(payload)).to_response()


@router.put("/{doctor_id}", dependencies=[Depends(require_roles("ADMIN"))])
async def update_doctor(
    doctor_id: str,
    payload: dict = Depends(validate_request(schemas.UPDATE_DOCTOR)),
    c: Controllers = Depends(get_controllers),
):
    return (await c.doctors.update(doctor_id, payload)).to_response()


@router.delete("/{doctor_id}", dependencies=[Depends(require_roles("ADMIN"))])
async def delete_doctor(doctor_id: str, c: Controllers = Depends(get_controllers)):
    return (await c.doctors.delete(doctor_id)).to_response()


@router.get("/{doctor_id}/appointments")
async def doctor_appointments(doctor_id: str, c: Controllers = Depends(get_controllers)):
    return (await c.appointments.list_related("doctor_id", doctor_id)).to_response()


@router.get("/{doctor_id}/prescriptions")
async def doctor_prescriptions(doctor_id: str, c: Controllers = Depends(get_controllers)):
    return (await c.prescriptions.list_related("doctor_id", doctor_id)).to_response()
