from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from medibloc.db.base import Base, utcnow


class PatientDisease(Base):
    __tablename__ = "patient_diseases"
    __table_args__ = (
        UniqueConstraint("patient_id", "disease_id", name="uq_patient_disease"),
        CheckConstraint("status IN ('ACTIVE','CURED','CHRONIC')", name="ck_patient_diseases_status"),
        CheckConstraint(
            "severity IN ('MILD','MODERATE','SEVERE','CRITICAL')",
            name="ck_patient_diseases_severity",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    patient_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("patients.id", ondelete="CASCADE"), index=True, nullable=False
    )
    disease_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("diseases.id", ondelete="CASCADE"), index=True, nullable=False
    )

    diagnosed_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="ACTIVE")
    severity: Mapped[str] = mapped_column(String(20), nullable=False, default="MILD")
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
