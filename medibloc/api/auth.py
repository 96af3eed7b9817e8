from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from medibloc.controllers.generic import ApiResult
from medibloc.core import validation_schemas as schemas
from medibloc.core.passwords import hash_password
from medibloc.core.request_validation import validate_request
from medibloc.core.security import get_current_user
from medibloc.db.session import get_db
from medibloc.models.user import User
from medibloc.schemas.user import RegisterIn, UserOut

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register")
def register(
    payload: dict = Depends(validate_request(schemas.REGISTER, sources=("body",))),
    db: Session = Depends(get_db),
) -> JSONResponse:
    data = RegisterIn.model_validate(payload)
    email = data.email.strip().lower()

    if db.query(User).filter(User.email == email).one_or_none():
        return ApiResult.failure(409, "email already in use").to_response()

    user = User(
        email=email,
        password_hash=hash_password(data.password),
        first_name=data.first_name,
        last_name=data.last_name,
        role=data.role or "PATIENT",
        is_active=True,
    )
    db.add(user)
    # commit here so a concurrent duplicate surfaces as a 409, not after the response
    db.commit()
    db.refresh(user)
    return ApiResult.success(UserOut.model_validate(user), status_code=201, message="user created").to_response()


@router.get("/me")
def me(current_user: User = Depends(get_current_user)) -> JSONResponse:
    """Current user, as identified by the dev auth header."""
    return ApiResult.success(UserOut.model_validate(current_user)).to_response()
