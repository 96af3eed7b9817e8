from pydantic import BaseModel


class ValidationError(BaseModel):
    """Individual validation error"""
    field: str
    code: str  # required, type, min_length, max_length, min, max, pattern, enum, custom
    message: str


class ValidationResult(BaseModel):
    """Outcome of running a schema over one request record"""
    is_valid: bool
    errors: list[ValidationError]
