from fastapi import APIRouter, Depends

from medibloc.api.deps import get_controllers
from medibloc.controllers.resources import Controllers
from medibloc.core import validation_schemas as schemas
from medibloc.core.rbac import require_roles
from medibloc.core.request_validation import validate_request
from medibloc.core.security import get_current_user

router = APIRouter(prefix="/countries", tags=["countries"], dependencies=[Depends(get_current_user)])


@router.get("")
async def list_countries(
    page: str | None = None,
    limit: str | None = None,
    c: Controllers = Depends(get_controllers),
):
    return (await c.countries.list(page, limit)).to_response()


@router.get("/{country_id}")
async def get_country(country_id: str, c: Controllers = Depends(get_controllers)):
    return (await c.countries.get_one(country_id)).to_response()


@router.post("", dependencies=[Depends(require_roles("ADMIN"))])
async def create_country(
    payload: dict = Depends(validate_request(schemas.CREATE_COUNTRY, sources=("body",))),
    c: Controllers = Depends(get_controllers),
):
    return (await c.countries.create(payload)).to_response()
