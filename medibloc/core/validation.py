"""
Declarative request validation.

A schema maps field names to a FieldRule. ``validate`` runs every rule of the
schema over one flat record and collects at most one error per field:

    schema = {
        "email": FieldRule(required=True, type="email"),
        "age": FieldRule(type="number", min=18),
    }
    result = validate(schema, {"email": "a@b.com", "age": "17"})
    # result.is_valid is False, result.errors[0].field == "age"

Rules are checked in a fixed order (presence, type, length, range, pattern,
enum, custom) and the first failing rule wins for its field. Fields are
independent: nothing here looks at two fields at once.
"""
from __future__ import annotations

import math
import re
from collections.abc import Mapping
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict

from medibloc.schemas.validation import ValidationError, ValidationResult

EMAIL_REGEX = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# matches what JavaScript's Number() takes from a trimmed string
_NUMERIC_STRING = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$|^[+-]?Infinity$")


class FieldType(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    EMAIL = "email"
    DATE = "date"
    ARRAY = "array"


class FieldRule(BaseModel):
    """Rules for one field. Every attribute is optional."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    required: bool = False
    type: FieldType | None = None
    min_length: int | None = None
    max_length: int | None = None
    min: float | None = None
    max: float | None = None
    pattern: re.Pattern | None = None
    enum: tuple[Any, ...] | None = None
    custom: Callable[[Any], bool] | None = None
    message: str | None = None  # overrides every default message for the field


ValidationSchema = Mapping[str, FieldRule]


# ---------- value helpers ----------

def is_valid_email(value: str) -> bool:
    return bool(EMAIL_REGEX.match(value))


def to_number(value: Any) -> float | None:
    """
    Loose numeric coercion. Returns None where JavaScript's Number() gives NaN.
    """
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        x = float(value)
        return None if math.isnan(x) else x
    if isinstance(value, str):
        s = value.strip()
        if s == "":
            return 0.0
        if not _NUMERIC_STRING.match(s):
            return None
        return float(s.replace("Infinity", "inf"))
    return None


def parse_date(value: Any) -> datetime | None:
    """
    ISO-8601 strings, epoch milliseconds, or date/datetime objects.
    Returns None when the value does not name a real calendar date.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    return None


def _strict_equals(a: Any, b: Any) -> bool:
    # True == 1 in Python; a role list must not accept 1 for True
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a is b
    return a == b


def _is_present(value: Any) -> bool:
    return value is not None and not (isinstance(value, str) and value == "")


def _error(field: str, rule: FieldRule, code: str, default: str) -> ValidationError:
    return ValidationError(field=field, code=code, message=rule.message or default)


# ---------- type checks ----------

def _check_string(value: Any) -> bool:
    return isinstance(value, str)


def _check_number(value: Any) -> bool:
    return to_number(value) is not None


def _check_boolean(value: Any) -> bool:
    return isinstance(value, bool) or (isinstance(value, str) and value in ("true", "false"))


def _check_email(value: Any) -> bool:
    return isinstance(value, str) and is_valid_email(value)


def _check_date(value: Any) -> bool:
    if not isinstance(value, (str, int, float, date)) or isinstance(value, bool):
        return False
    return parse_date(value) is not None


def _check_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


TYPE_CHECKS: dict[FieldType, tuple[Callable[[Any], bool], str]] = {
    FieldType.STRING: (_check_string, "must be a string"),
    FieldType.NUMBER: (_check_number, "must be a valid number"),
    FieldType.BOOLEAN: (_check_boolean, "must be a boolean"),
    FieldType.EMAIL: (_check_email, "must be a valid email"),
    FieldType.DATE: (_check_date, "must be a valid date"),
    FieldType.ARRAY: (_check_array, "must be an array"),
}


# ---------- rule steps ----------

def _validate_type(field: str, value: Any, rule: FieldRule) -> ValidationError | None:
    if rule.type is None:
        return None
    check, what = TYPE_CHECKS[rule.type]
    if not check(value):
        return _error(field, rule, "type", f"{field} {what}")
    return None


def _validate_length(field: str, value: Any, rule: FieldRule) -> ValidationError | None:
    if not isinstance(value, str):
        return None
    if rule.min_length is not None and len(value) < rule.min_length:
        return _error(field, rule, "min_length", f"{field} must contain at least {rule.min_length} characters")
    if rule.max_length is not None and len(value) > rule.max_length:
        return _error(field, rule, "max_length", f"{field} must not exceed {rule.max_length} characters")
    return None


def _validate_range(field: str, value: Any, rule: FieldRule) -> ValidationError | None:
    if rule.min is None and rule.max is None:
        return None
    x = to_number(value)
    if x is None:
        return None
    if rule.min is not None and x < rule.min:
        return _error(field, rule, "min", f"{field} must be at least {_fmt(rule.min)}")
    if rule.max is not None and x > rule.max:
        return _error(field, rule, "max", f"{field} must not exceed {_fmt(rule.max)}")
    return None


def _validate_pattern(field: str, value: Any, rule: FieldRule) -> ValidationError | None:
    if rule.pattern is not None and isinstance(value, str) and not rule.pattern.search(value):
        return _error(field, rule, "pattern", f"{field} has an invalid format")
    return None


def _validate_enum(field: str, value: Any, rule: FieldRule) -> ValidationError | None:
    if rule.enum is None:
        return None
    if not any(_strict_equals(value, choice) for choice in rule.enum):
        allowed = ", ".join(str(c) for c in rule.enum)
        return _error(field, rule, "enum", f"{field} must be one of: {allowed}")
    return None


def _validate_custom(field: str, value: Any, rule: FieldRule) -> ValidationError | None:
    if rule.custom is not None and not rule.custom(value):
        return _error(field, rule, "custom", f"{field} is not valid")
    return None


def _fmt(x: float) -> str:
    return str(int(x)) if float(x).is_integer() else str(x)


STEPS = (
    _validate_type,
    _validate_length,
    _validate_range,
    _validate_pattern,
    _validate_enum,
    _validate_custom,
)


def validate_field(field: str, value: Any, rule: FieldRule) -> ValidationError | None:
    """First failing rule for one field, or None."""
    if not _is_present(value):
        if rule.required:
            return _error(field, rule, "required", f"{field} is required")
        return None

    for step in STEPS:
        err = step(field, value, rule)
        if err is not None:
            return err
    return None


def validate(schema: ValidationSchema, data: Mapping[str, Any]) -> ValidationResult:
    """
    Run every rule of ``schema`` over ``data``.

    Never raises for bad input. A ``custom`` predicate that raises is a
    programming error and propagates to the caller.
    """
    errors: list[ValidationError] = []
    for field, rule in schema.items():
        err = validate_field(field, data.get(field), rule)
        if err is not None:
            errors.append(err)

    return ValidationResult(is_valid=not errors, errors=errors)
