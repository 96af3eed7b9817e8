from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from medibloc.db.base import Base


class Country(Base):
    __tablename__ = "countries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(120), unique=True, nullable=False)
    code: Mapped[str] = mapped_column(String(3), unique=True, nullable=False)  # ISO 3166 alpha-2/3
