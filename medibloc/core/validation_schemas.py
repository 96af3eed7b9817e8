"""
Predefined request schemas, one per write route.

Keys are wire (camelCase) field names. Each schema is a read-only mapping
built at import time.
"""
import re
from types import MappingProxyType

from medibloc.core.validation import FieldRule
from medibloc.models.appointment import APPOINTMENT_STATUSES
from medibloc.models.medicine import MEDICINE_TYPES
from medibloc.models.patient import GENDERS
from medibloc.models.user import ROLES

DISEASE_STATUSES = ("ACTIVE", "CURED", "CHRONIC")
DISEASE_SEVERITIES = ("MILD", "MODERATE", "SEVERE", "CRITICAL")

INTEGER_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)
DAY_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


def schema(**rules: FieldRule) -> MappingProxyType:
    return MappingProxyType(dict(rules))


def _optional(type_: str, **extra) -> FieldRule:
    return FieldRule(required=False, type=type_, **extra)


def is_whole_number(value) -> bool:
    # ids must survive int coercion unchanged: 3, 3.0 and "3" pass, 1.5 and "1e3" do not
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return value.is_integer()
    return isinstance(value, str) and INTEGER_PATTERN.fullmatch(value) is not None


def is_calendar_day(value) -> bool:
    return isinstance(value, str) and DAY_PATTERN.fullmatch(value) is not None


def _id(required: bool = True) -> FieldRule:
    return FieldRule(required=required, type="number", min=1, custom=is_whole_number)


def _day(required: bool = False) -> FieldRule:
    return FieldRule(required=required, type="date", custom=is_calendar_day)


# ---------- auth ----------

REGISTER = schema(
    email=FieldRule(required=True, type="email", message="a valid email is required"),
    password=FieldRule(
        required=True, type="string", min_length=6,
        message="password must contain at least 6 characters",
    ),
    firstName=FieldRule(
        required=True, type="string", min_length=2,
        message="first name is required and must contain at least 2 characters",
    ),
    lastName=FieldRule(
        required=True, type="string", min_length=2,
        message="last name is required and must contain at least 2 characters",
    ),
    role=FieldRule(
        required=False, type="string", enum=ROLES,
        message="role must be PATIENT, DOCTOR or ADMIN",
    ),
)

LOGIN = schema(
    email=FieldRule(required=True, type="email", message="a valid email is required"),
    password=FieldRule(required=True, type="string", message="password is required"),
)

# ---------- patients ----------

CREATE_PATIENT = schema(
    email=FieldRule(required=True, type="email", message="a valid email is required"),
    password=FieldRule(
        required=True, type="string", min_length=6,
        message="password must contain at least 6 characters",
    ),
    firstName=FieldRule(required=True, type="string", min_length=2),
    lastName=FieldRule(required=True, type="string", min_length=2),
    birthDate=_day(),
    gender=_optional("string", enum=GENDERS),
    phone=_optional("string", max_length=40),
    address=_optional("string", max_length=500),
)

UPDATE_PATIENT = schema(
    firstName=_optional("string", min_length=2),
    lastName=_optional("string", min_length=2),
    birthDate=_day(),
    gender=_optional("string", enum=GENDERS),
    phone=_optional("string", max_length=40),
    address=_optional("string", max_length=500),
)

# ---------- doctors ----------

CREATE_DOCTOR = schema(
    email=FieldRule(required=True, type="email"),
    password=FieldRule(required=True, type="string", min_length=6),
    firstName=FieldRule(required=True, type="string"),
    lastName=FieldRule(required=True, type="string"),
    specialty=_optional("string", max_length=120),
    phone=_optional("string", max_length=40),
)

UPDATE_DOCTOR = schema(
    firstName=_optional("string"),
    lastName=_optional("string"),
    specialty=_optional("string", max_length=120),
    phone=_optional("string", max_length=40),
)

# ---------- appointments ----------

CREATE_APPOINTMENT = schema(
    patientId=_id(),
    doctorId=_id(),
    scheduledAt=FieldRule(required=True, type="date"),
    reason=_optional("string", max_length=500),
    notes=_optional("string"),
)

UPDATE_APPOINTMENT = schema(
    scheduledAt=_optional("date"),
    reason=_optional("string", max_length=500),
    notes=_optional("string"),
    status=_optional("string", enum=APPOINTMENT_STATUSES),
)

UPDATE_APPOINTMENT_STATUS = schema(
    status=FieldRule(required=True, type="string", enum=APPOINTMENT_STATUSES),
)

# ---------- diseases / symptoms ----------

CREATE_DISEASE = schema(
    name=FieldRule(required=True, type="string", max_length=200),
    description=_optional("string"),
    isViral=_optional("boolean"),
    isBacterial=_optional("boolean"),
    isGenetic=_optional("boolean"),
    isChronic=_optional("boolean"),
)

UPDATE_DISEASE = schema(
    name=_optional("string", max_length=200),
    description=_optional("string"),
    isViral=_optional("boolean"),
    isBacterial=_optional("boolean"),
    isGenetic=_optional("boolean"),
    isChronic=_optional("boolean"),
)

CREATE_SYMPTOM = schema(
    name=FieldRule(required=True, type="string", max_length=200),
    description=_optional("string"),
)

UPDATE_SYMPTOM = schema(
    name=_optional("string", max_length=200),
    description=_optional("string"),
)

# ---------- medicines / pharmacies ----------

CREATE_MEDICINE = schema(
    name=FieldRule(required=True, type="string", max_length=200),
    type=FieldRule(required=True, type="string", enum=MEDICINE_TYPES),
    description=_optional("string"),
    composition=_optional("string"),
    scientificName=_optional("string", max_length=200),
    commonNames=_optional("array"),
    sideEffects=_optional("array"),
    contraindications=_optional("array"),
    pharmacyId=_id(required=False),
)

UPDATE_MEDICINE = schema(
    name=_optional("string", max_length=200),
    type=_optional("string", enum=MEDICINE_TYPES),
    description=_optional("string"),
    composition=_optional("string"),
    scientificName=_optional("string", max_length=200),
    commonNames=_optional("array"),
    sideEffects=_optional("array"),
    contraindications=_optional("array"),
    pharmacyId=_id(required=False),
)

MEDICINE_TYPE_PATH = schema(
    type=FieldRule(required=True, type="string", enum=MEDICINE_TYPES),
)

CREATE_PHARMACY = schema(
    name=FieldRule(required=True, type="string", max_length=200),
    address=FieldRule(required=True, type="string", max_length=500),
    city=FieldRule(required=True, type="string", max_length=120),
    countryId=_id(),
    phone=_optional("string", max_length=40),
    email=_optional("email"),
)

UPDATE_PHARMACY = schema(
    name=_optional("string", max_length=200),
    address=_optional("string", max_length=500),
    city=_optional("string", max_length=120),
    countryId=_id(required=False),
    phone=_optional("string", max_length=40),
    email=_optional("email"),
)

# ---------- prescriptions / medical records ----------

CREATE_PRESCRIPTION = schema(
    doctorId=_id(),
    patientId=_id(),
    medications=FieldRule(required=True, type="string"),
    diagnosis=_optional("string", max_length=500),
    notes=_optional("string"),
)

CREATE_MEDICAL_RECORD = schema(
    patientId=_id(),
    title=FieldRule(required=True, type="string", max_length=200),
    content=FieldRule(required=True, type="string"),
    files=_optional("array"),
)

UPDATE_MEDICAL_RECORD = schema(
    title=_optional("string", max_length=200),
    content=_optional("string"),
    files=_optional("array"),
)

# ---------- patient diseases ----------

CREATE_PATIENT_DISEASE = schema(
    patientId=_id(),
    diseaseId=_id(),
    status=_optional("string", enum=DISEASE_STATUSES),
    severity=_optional("string", enum=DISEASE_SEVERITIES),
    notes=_optional("string"),
)

UPDATE_PATIENT_DISEASE = schema(
    status=_optional("string", enum=DISEASE_STATUSES),
    severity=_optional("string", enum=DISEASE_SEVERITIES),
    notes=_optional("string"),
)

# ---------- countries ----------

CREATE_COUNTRY = schema(
    name=FieldRule(required=True, type="string", min_length=2, max_length=120),
    code=FieldRule(
        required=True, type="string", min_length=2, max_length=3, pattern=re.compile(r"^[A-Z]+$"),
        message="code must be a 2 or 3 letter uppercase ISO code",
    ),
)
