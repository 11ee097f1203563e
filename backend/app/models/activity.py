"""
Shelter Admin Backend — Activity Model
========================================

What:  Shelter events (adoption days, trainings, fundraisers) that people sign up for.

participant_count is only changed by the join/leave endpoints, through
conditional atomic updates: it never exceeds participant_limit (when set)
and never drops below zero.
"""

from datetime import datetime

from sqlalchemy import JSON, DateTime, Index, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.mixins import IntegerPKMixin, TimestampMixin


class Activity(IntegerPKMixin, TimestampMixin, Base):
    __tablename__ = "activities"

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    type: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        comment="adoption, volunteer, training, fundraising, education",
    )
    start_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    participant_limit: Mapped[int | None] = mapped_column(Integer, comment="NULL means unlimited")
    participant_count: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default=text("0"),
    )
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="upcoming",
        server_default=text("'upcoming'"),
        comment="upcoming, ongoing, completed, cancelled",
    )
    organizer: Mapped[str] = mapped_column(String(50), nullable=False)
    requirements: Mapped[str | None] = mapped_column(Text)
    images: Mapped[list | None] = mapped_column(JSON)
    tags: Mapped[list | None] = mapped_column(JSON)

    __table_args__ = (
        Index("idx_activities_start_date", "start_date"),
    )

    def __repr__(self) -> str:
        return (
            f"<Activity(id={self.id}, title='{self.title}', "
            f"participants={self.participant_count}/{self.participant_limit})>"
        )
