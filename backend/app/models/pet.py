"""
Shelter Admin Backend — Pet Model
===================================

What:  Animals currently or previously in the shelter's care.
Who:   PetService; the dashboard reads it for counts and type distribution.

Counters:
    view_count and favorite_count are denormalized and only ever changed by
    atomic `col = col ± 1` statements. favorite_count never goes below zero.
"""

from datetime import date

from sqlalchemy import JSON, Date, Index, Integer, Numeric, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.mixins import IntegerPKMixin, TimestampMixin


class Pet(IntegerPKMixin, TimestampMixin, Base):
    __tablename__ = "pets"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    type: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        comment="dog, cat, rabbit, bird, hamster, other",
    )
    breed: Mapped[str] = mapped_column(String(50), nullable=False)
    # asdecimal=False: the API speaks JSON numbers, not Decimal strings
    age: Mapped[float] = mapped_column(Numeric(3, 1, asdecimal=False), nullable=False)
    gender: Mapped[str] = mapped_column(String(10), nullable=False, comment="male, female")
    weight: Mapped[float | None] = mapped_column(Numeric(5, 2, asdecimal=False))
    color: Mapped[str | None] = mapped_column(String(50))
    health_status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="healthy",
        server_default=text("'healthy'"),
        comment="healthy, treating, recovered, critical",
    )
    adoption_status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="available",
        server_default=text("'available'"),
        comment="available, pending, adopted, unavailable",
    )
    description: Mapped[str | None] = mapped_column(Text)
    images: Mapped[list | None] = mapped_column(JSON, comment="Image URLs")
    location: Mapped[str | None] = mapped_column(String(255))
    rescue_date: Mapped[date | None] = mapped_column(Date)
    rescuer: Mapped[str | None] = mapped_column(String(50))
    tags: Mapped[list | None] = mapped_column(JSON)
    view_count: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default=text("0"),
        comment="Incremented on every detail fetch",
    )
    favorite_count: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default=text("0"),
    )
    adopted_by: Mapped[str | None] = mapped_column(String(100))
    adopted_date: Mapped[date | None] = mapped_column(Date)

    __table_args__ = (
        Index("idx_pets_create_time", "create_time"),
        Index("idx_pets_adoption_status", "adoption_status"),
    )

    def __repr__(self) -> str:
        return f"<Pet(id={self.id}, name='{self.name}', type='{self.type}')>"
