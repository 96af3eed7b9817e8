from fastapi import APIRouter, Depends

from medibloc.api.deps import get_controllers
from medibloc.controllers.resources import Controllers
from medibloc.core import validation_schemas as schemas
from medibloc.core.rbac import require_roles
from medibloc.core.request_validation import validate_request
from medibloc.core.security import get_current_user

router = APIRouter(prefix="/symptoms", tags=["symptoms"], dependencies=[Depends(get_current_user)])

admin_only = [Depends(require_roles("ADMIN"))]


@router.get("")
async def list_symptoms(
    page: str | None = None,
    limit: str | None = None,
    c: Controllers = Depends(get_controllers),
):
    return (await c.symptoms.list(page, limit)).to_response()


@router.get("/{symptom_id}")
async def get_symptom(symptom_id: str, c: Controllers = Depends(get_controllers)):
    return (await c.symptoms.get_one(symptom_id)).to_response()


@router.get("/{symptom_id}/diseases")
async def symptom_diseases(symptom_id: str, c: Controllers = Depends(get_controllers)):
    return (await c.symptoms.diseases(symptom_id)).to_response()


@router.post("", dependencies=admin_only)
async def create_symptom(
    payload: dict = Depends(validate_request(schemas.CREATE_SYMPTOM)),
    c: Controllers = Depends(get_controllers),
):
    return (await c.symptoms.create(payload)).to_response()


@router.put("/{symptom_id}", dependencies=admin_only)
async def update_symptom(
    symptom_id: str,
    payload: dict = Depends(validate_request(schemas.UPDATE_SYMPTOM)),
    c: Controllers = Depends(get_controllers),
):
    return (await c.symptoms.update(symptom_id, payload)).to_response()


@router.delete("/{symptom_id}", dependencies=admin_only)
async def delete_symptom(symptom_id: str, c: Controllers = Depends(get_controllers)):
    return (await c.symptoms.delete(symptom_id)).to_response()
