from fastapi import APIRouter, Depends

from medibloc.api.deps import get_controllers
from medibloc.controllers.resources import Controllers
from medibloc.core import validation_schemas as schemas
from medibloc.core.rbac import require_roles
from medibloc.core.request_validation import validate_request
from medibloc.core.security import get_current_user

router = APIRouter(prefix="/medicines", tags=["medicines"], dependencies=[Depends(get_current_user)])

admin_only = [Depends(require_roles("ADMIN"))]


@router.get("")
async def list_medicines(
    page: str | None = None,
    limit: str | None = None,
    c: Controllers = Depends(get_controllers),
):
    return (await c.medicines.list(page, limit)).to_response()


@router.get(
    "/type/{type}",
    dependencies=[Depends(validate_request(schemas.MEDICINE_TYPE_PATH, sources=("path",)))],
)
async def medicines_by_type(type: str, c: Controllers = Depends(get_controllers)):
    return (await c.medicines.list_where({"type": type})).to_response()


@router.get("/pharmacy/{pharmacy_id}")
async def medicines_by_pharmacy(pharmacy_id: str, c: Controllers = Depends(get_controllers)):
    return (await c.medicines.list_related("pharmacy_id", pharmacy_id)).to_response()


@router.get("/{medicine_id}")
async def get_medicine(medicine_id: str, c: Controllers = Depends(get_controllers)):
    return (await c.medicines.get_one(medicine_id)).to_response()


@router.post("", dependencies=admin_only)
async def create_medicine(
    payload: dict = Depends(validate_request(schemas.CREATE_MEDICINE)),
    c: Controllers = Depends(get_controllers),
):
    return (await c.medicines.create(payload)).to_response()


@router.put("/{medicine_id}", dependencies=admin_only)
async def update_medicine(
    medicine_id: str,
    payload: dict = Depends(validate_request(schemas.UPDATE_MEDICINE)),
    c: Controllers = Depends(get_controllers),
):
    return (await c.medicines.update(medicine_id, payload)).to_response()


@router.delete("/{medicine_id}", dependencies=admin_only)
async def delete_medicine(medicine_id: str, c: Controllers = Depends(get_controllers)):
    return (await c.medicines.delete(medicine_id)).to_response()
