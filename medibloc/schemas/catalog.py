"""Wire models for the reference catalog: diseases, symptoms, countries."""
from datetime import datetime

from medibloc.schemas.common import CamelModel


class SymptomCreate(CamelModel):
    name: str
    description: str | None = None


class SymptomUpdate(CamelModel):
    name: str | None = None
    description: str | None = None


class SymptomOut(CamelModel):
    id: int
    name: str
    description: str | None
    created_at: datetime


class DiseaseCreate(CamelModel):
    name: str
    description: str | None = None
    is_viral: bool = False
    is_bacterial: bool = False
    is_genetic: bool = False
    is_chronic: bool = False


class DiseaseUpdate(CamelModel):
    name: str | None = None
    description: str | None = None
    is_viral: bool | None = None
    is_bacterial: bool | None = None
    is_genetic: bool | None = None
    is_chronic: bool | None = None


class DiseaseOut(CamelModel):
    id: int
    name: str
    description: str | None
    is_viral: bool
    is_bacterial: bool
    is_genetic: bool
    is_chronic: bool
    created_at: datetime
    updated_at: datetime


class DiseaseWithSymptomsOut(DiseaseOut):
    symptoms: list[SymptomOut]


class CountryOut(CamelModel):
    id: int
    name: str
    code: str


class CountryCreate(CamelModel):
    name: str
    code: str


class CountryUpdate(CamelModel):
    name: str | None = None
    code: str | None = None
