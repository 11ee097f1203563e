"""
Shelter Admin Backend — Adoption Record Model
===============================================

What:  A finalized adoption, with the post-adoption follow-up visit log.
Who:   AdoptionRecordService.

Table Design:
    - id: UUID string, independent of the application that led to it
    - record_number: human-readable `AR-YYYY-NNNNNN`, unique constraint;
      the service regenerates on collision
    - follow_ups: append-only JSON list, oldest first. Each entry is
      {id, date, content, operator, nextFollowUpDate}
    - last_follow_up_date / next_follow_up_date: derived from the newest entry
"""

import uuid
from datetime import date

from sqlalchemy import JSON, Date, Index, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.mixins import TimestampMixin

RECORD_NUMBER_PREFIX = "AR"


def new_record_id() -> str:
    return str(uuid.uuid4())


class AdoptionRecord(TimestampMixin, Base):
    __tablename__ = "adoption_records"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_record_id)
    adoption_application_id: Mapped[int | None] = mapped_column(Integer)
    record_number: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        unique=True,
        comment="AR-YYYY-NNNNNN",
    )

    # ── Pet snapshot ──────────────────────────────────────────────────────
    pet_id: Mapped[int] = mapped_column(Integer, nullable=False)
    pet_name: Mapped[str] = mapped_column(String(100), nullable=False)
    pet_breed: Mapped[str | None] = mapped_column(String(100))
    pet_image: Mapped[str | None] = mapped_column(Text)

    # ── Adopter snapshot ──────────────────────────────────────────────────
    adopter_id: Mapped[int] = mapped_column(Integer, nullable=False)
    adopter_name: Mapped[str] = mapped_column(String(100), nullable=False)
    adopter_phone: Mapped[str | None] = mapped_column(String(20))
    adopter_email: Mapped[str | None] = mapped_column(String(100))
    adopter_address: Mapped[str | None] = mapped_column(Text)

    adoption_date: Mapped[date] = mapped_column(Date, nullable=False)
    agreement_number: Mapped[str | None] = mapped_column(String(100))
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="active",
        server_default=text("'active'"),
        comment="active, completed, cancelled",
    )

    # ── Follow-up log ─────────────────────────────────────────────────────
    follow_ups: Mapped[list | None] = mapped_column(JSON)
    last_follow_up_date: Mapped[date | None] = mapped_column(Date)
    next_follow_up_date: Mapped[date | None] = mapped_column(Date)

    remarks: Mapped[str | None] = mapped_column(Text)
    created_by: Mapped[str | None] = mapped_column(String(50))
    updated_by: Mapped[str | None] = mapped_column(String(50))

    __table_args__ = (
        Index("idx_adoption_records_adoption_date", "adoption_date"),
        Index("idx_adoption_records_status", "status"),
    )

    def __repr__(self) -> str:
        return (
            f"<AdoptionRecord(id='{self.id}', number='{self.record_number}', "
            f"status='{self.status}')>"
        )
