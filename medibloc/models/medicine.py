from datetime import datetime

from sqlalchemy import JSON, CheckConstraint, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from medibloc.db.base import Base, utcnow

MEDICINE_TYPES = ("TABLET", "CAPSULE", "SYRUP", "INJECTION", "CREAM", "DROPS", "OTHER")


class Medicine(Base):
    __tablename__ = "medicines"
    __table_args__ = (
        CheckConstraint(
            "type IN ('TABLET','CAPSULE','SYRUP','INJECTION','CREAM','DROPS','OTHER')",
            name="ck_medicines_type",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(200), index=True, nullable=False)
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    composition: Mapped[str | None] = mapped_column(Text, nullable=True)
    scientific_name: Mapped[str | None] = mapped_column(String(200), nullable=True)

    # lists of plain strings
    common_names: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    side_effects: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    contraindications: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    pharmacy_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("pharmacies.id", ondelete="SET NULL"), index=True, nullable=True
    )

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
