"""
Shelter Admin Backend — Volunteer Model
=========================================

What:  The volunteer roster, with cumulative participation counters.

activities_participated and total_hours move together through the
`POST /volunteers/{id}/hours` operation; they are not part of the update DTO.
"""

from datetime import date

from sqlalchemy import JSON, Date, Index, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.mixins import IntegerPKMixin, TimestampMixin


class Volunteer(IntegerPKMixin, TimestampMixin, Base):
    __tablename__ = "volunteers"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    phone: Mapped[str] = mapped_column(String(20), nullable=False)
    email: Mapped[str] = mapped_column(String(100), nullable=False)
    age: Mapped[int | None] = mapped_column(Integer)
    occupation: Mapped[str | None] = mapped_column(String(100))
    experience: Mapped[str | None] = mapped_column(String(255))
    available_time: Mapped[str | None] = mapped_column(String(100))
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="active",
        server_default=text("'active'"),
        comment="active, inactive",
    )
    join_date: Mapped[date] = mapped_column(Date, nullable=False)
    activities_participated: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default=text("0"),
    )
    total_hours: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default=text("0"),
    )
    skills: Mapped[list | None] = mapped_column(JSON)
    avatar: Mapped[str | None] = mapped_column(String(255))
    address: Mapped[str | None] = mapped_column(String(255))

    __table_args__ = (
        Index("idx_volunteers_join_date", "join_date"),
    )

    def __repr__(self) -> str:
        return f"<Volunteer(id={self.id}, name='{self.name}', status='{self.status}')>"
