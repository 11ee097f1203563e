"""
Shelter Admin Backend — Rescue Model
======================================

What:  Log of rescue incidents: where and how an animal was brought in,
       its condition, and what it cost.
"""

from datetime import datetime

from sqlalchemy import JSON, DateTime, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.mixins import IntegerPKMixin, TimestampMixin


class Rescue(IntegerPKMixin, TimestampMixin, Base):
    __tablename__ = "rescues"

    pet_id: Mapped[int] = mapped_column(Integer, nullable=False)
    pet_name: Mapped[str] = mapped_column(String(100), nullable=False)
    rescue_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    rescue_location: Mapped[str] = mapped_column(String(255), nullable=False)
    rescuer: Mapped[str] = mapped_column(String(50), nullable=False)
    rescue_type: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    health_condition: Mapped[str] = mapped_column(
        String(50), nullable=False, comment="Free text; stats count 'critical' and 'healthy'",
    )
    immediate_action: Mapped[str] = mapped_column(String(255), nullable=False)
    images: Mapped[list | None] = mapped_column(JSON)
    video_url: Mapped[str | None] = mapped_column(String(255))
    cost: Mapped[float | None] = mapped_column(Numeric(10, 2, asdecimal=False))
    notes: Mapped[str | None] = mapped_column(Text)

    __table_args__ = (
        Index("idx_rescues_rescue_date", "rescue_date"),
    )

    def __repr__(self) -> str:
        return f"<Rescue(id={self.id}, pet='{self.pet_name}', date='{self.rescue_date}')>"
