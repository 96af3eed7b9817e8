from datetime import datetime

from medibloc.schemas.catalog import CountryOut
from medibloc.schemas.common import CamelModel


class PharmacyCreate(CamelModel):
    name: str
    address: str
    city: str
    country_id: int
    phone: str | None = None
    email: str | None = None


class PharmacyUpdate(CamelModel):
    name: str | None = None
    address: str | None = None
    city: str | None = None
    country_id: int | None = None
    phone: str | None = None
    email: str | None = None


class PharmacyOut(CamelModel):
    id: int
    name: str
    address: str
    city: str
    country_id: int
    country: CountryOut | None
    phone: str | None
    email: str | None
    created_at: datetime
    updated_at: datetime


class MedicineCreate(CamelModel):
    name: str
    type: str
    description: str | None = None
    composition: str | None = None
    scientific_name: str | None = None
    common_names: list[str] = []
    side_effects: list[str] = []
    contraindications: list[str] = []
    pharmacy_id: int | None = None


class MedicineUpdate(CamelModel):
    name: str | None = None
    type: str | None = None
    description: str | None = None
    composition: str | None = None
    scientific_name: str | None = None
    common_names: list[str] | None = None
    side_effects: list[str] | None = None
    contraindications: list[str] | None = None
    pharmacy_id: int | None = None


class MedicineOut(CamelModel):
    id: int
    name: str
    type: str
    description: str | None
    composition: str | None
    scientific_name: str | None
    common_names: list[str]
    side_effects: list[str]
    contraindications: list[str]
    pharmacy_id: int | None
    created_at: datetime
    updated_at: datetime
