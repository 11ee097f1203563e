"""
Shelter Admin Backend — Adoption Application Model
====================================================

What:  An application by a member of the public to adopt one pet.
Who:   AdoptionService; the dashboard reads it for the trend chart and
       the recent-applications list.

Lifecycle:
    pending → approved | rejected | cancelled. Only pending applications can
    be edited, reviewed or cancelled. The pet is referenced by id and name
    copied at creation time, with no foreign key.
"""

from datetime import datetime

from sqlalchemy import JSON, Boolean, DateTime, Index, Integer, String, Text, false, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.mixins import IntegerPKMixin, TimestampMixin, utcnow


class Adoption(IntegerPKMixin, TimestampMixin, Base):
    __tablename__ = "adoptions"

    pet_id: Mapped[int] = mapped_column(Integer, nullable=False)
    pet_name: Mapped[str] = mapped_column(String(100), nullable=False)

    # ── Applicant ─────────────────────────────────────────────────────────
    applicant_name: Mapped[str] = mapped_column(String(100), nullable=False)
    applicant_phone: Mapped[str] = mapped_column(String(20), nullable=False)
    applicant_email: Mapped[str] = mapped_column(String(100), nullable=False)
    applicant_id_card: Mapped[str] = mapped_column(String(20), nullable=False)
    applicant_address: Mapped[str] = mapped_column(Text, nullable=False)

    application_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="pending",
        server_default=text("'pending'"),
        comment="pending, approved, rejected, cancelled",
    )

    # ── Review outcome ────────────────────────────────────────────────────
    # approval_* and rejection_* are mutually exclusive
    approval_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    approver: Mapped[str | None] = mapped_column(String(50))
    rejection_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    rejecter: Mapped[str | None] = mapped_column(String(50))
    reject_reason: Mapped[str | None] = mapped_column(Text)
    remarks: Mapped[str | None] = mapped_column(Text)

    # ── Household questionnaire ───────────────────────────────────────────
    experience: Mapped[str | None] = mapped_column(String(100))
    housing_type: Mapped[str | None] = mapped_column(String(50))
    has_yard: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false(),
    )
    family_members: Mapped[int | None] = mapped_column(Integer)
    work_hours: Mapped[str | None] = mapped_column(String(50))

    review_notes: Mapped[list | None] = mapped_column(
        JSON, comment="[{date, content, operator}]",
    )

    __table_args__ = (
        Index("idx_adoptions_application_date", "application_date"),
        Index("idx_adoptions_status", "status"),
    )

    def __repr__(self) -> str:
        return (
            f"<Adoption(id={self.id}, pet_id={self.pet_id}, "
            f"applicant='{self.applicant_name}', status='{self.status}')>"
        )
