from fastapi import APIRouter, Depends

from medibloc.api.deps import get_controllers
from medibloc.controllers.resources import Controllers
from medibloc.core import validation_schemas as schemas
from medibloc.core.rbac import require_roles
from medibloc.core.request_validation import validate_request
from medibloc.core.security import get_current_user

router = APIRouter(prefix="/pharmacies", tags=["pharmacies"], dependencies=[Depends(get_current_user)])

admin_only = [Depends(require_roles("ADMIN"))]


@router.get("")
async def list_pharmacies(
    page: str | None = None,
    limit: str | None = None,
    c: Controllers = Depends(get_controllers),
):
    return (await c.pharmacies.list(page, limit)).to_response()


@router.get("/country/{country_id}")
async def pharmacies_by_country(country_id: str, c: Controllers = Depends(get_controllers)):
    return (await c.pharmacies.list_related("country_id", country_id)).to_response()


@router.get("/{pharmacy_id}")
async def get_pharmacy(pharmacy_id: str, c: Controllers = Depends(get_controllers)):
    return (await c.pharmacies.get_one(pharmacy_id)).to_response()


@router.get("/{pharmacy_id}/medicines")
async def pharmacy_medicines(pharmacy_id: str, c: Controllers = Depends(get_controllers)):
    return (await c.medicines.list_related("pharmacy_id", pharmacy_id)).to_response()


@router.post("", dependencies=admin_only)
async def create_pharmacy(
    payload: dict = Depends(validate_request(schemas.CREATE_PHARMACY)),
    c: Controllers = Depends(get_controllers),
):
    return (await c.pharmacies.create(payload)).to_response()


@router.put("/{pharmacy_id}", dependencies=admin_only)
async def update_pharmacy(
    pharmacy_id: str,
    payload: dict = Depends(validate_request(schemas.UPDATE_PHARMACY)),
    c: Controllers = Depends(get_controllers),
):
    return (await c.pharmacies.update(pharmacy_id, payload)).to_response()


@router.delete("/{pharmacy_id}", dependencies=admin_only)
async def delete_pharmacy(pharmacy_id: str, c: Controllers = Depends(get_controllers)):
    return (await c.pharmacies.delete(pharmacy_id)).to_response()
