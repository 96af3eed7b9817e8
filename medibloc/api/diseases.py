from fastapi import APIRouter, Depends

from medibloc.api.deps import get_controllers
from medibloc.controllers.resources import Controllers
from medibloc.core import validation_schemas as schemas
from medibloc.core.rbac import require_roles
from medibloc.core.request_validation import validate_request
from medibloc.core.security import get_current_user

router = APIRouter(prefix="/diseases", tags=["diseases"], dependencies=[Depends(get_current_user)])

admin_only = [Depends(require_roles("ADMIN"))]


@router.get("")
async def list_diseases(
    page: str | None = None,
    limit: str | None = None,
    c: Controllers = Depends(get_controllers),
):
    return (await c.diseases.list(page, limit)).to_response()


@router.get("/{disease_id}")
async def get_disease(disease_id: str, c: Controllers = Depends(get_controllers)):
    return (await c.diseases.get_one(disease_id)).to_response()


@router.post("", dependencies=admin_only)
async def create_disease(
    payload: dict = Depends(validate_request(schemas.CREATE_DISEASE)),
    c: Controllers = Depends(get_controllers),
):
    return (await c.diseases.create(payload)).to_response()


@router.put("/{disease_id}", dependencies=admin_only)
async def update_disease(
    disease_id: str,
    payload: dict = Depends(validate_request(schemas.UPDATE_DISEASE)),
    c: Controllers = Depends(get_controllers),
):
    return (await c.diseases.update(disease_id, payload)).to_response()


@router.delete("/{disease_id}", dependencies=admin_only)
async def delete_disease(disease_id: str, c: Controllers = Depends(get_controllers)):
    return (await c.diseases.delete(disease_id)).to_response()


@router.get("/{disease_id}/symptoms")
async def disease_symptoms(disease_id: str, c: Controllers = Depends(get_controllers)):
    return (await c.diseases.symptoms(disease_id)).to_response()


@router.post("/{disease_id}/symptoms/{symptom_id}", dependencies=admin_only)
async def add_disease_symptom(disease_id: str, symptom_id: str, c: Controllers = Depends(get_controllers)):
    return (await c.diseases.link_symptom(disease_id, symptom_id, attach=True)).to_response()


@router.delete("/{disease_id}/symptoms/{symptom_id}", dependencies=admin_only)
async def remove_disease_symptom(disease_id: str, symptom_id: str, c: Controllers = Depends(get_controllers)):
    return (await c.diseases.link_symptom(disease_id, symptom_id, attach=False)).to_response()
