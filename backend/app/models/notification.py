"""
Shelter Admin Backend — Notification Model
============================================

What:  Inbox entries shown in the admin console, optionally pointing at
       another record through (target_type, target_id).
"""

from sqlalchemy import Boolean, Index, Integer, String, Text, false
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.mixins import IntegerPKMixin, TimestampMixin


class Notification(IntegerPKMixin, TimestampMixin, Base):
    __tablename__ = "notifications"

    type: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        comment="adoption, rescue, donation, activity, system",
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    target_id: Mapped[int | None] = mapped_column(Integer)
    target_type: Mapped[str | None] = mapped_column(String(50))
    is_read: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false(),
    )

    __table_args__ = (
        Index("idx_notifications_create_time", "create_time"),
        Index("idx_notifications_is_read", "is_read"),
    )

    def __repr__(self) -> str:
        return f"<Notification(id={self.id}, type='{self.type}', read={self.is_read})>"
