"""
Shelter Admin Backend — Donation Model
========================================

What:  Money and in-kind donations received by the shelter.

Goods donations list their line items in `items` as
[{name, quantity, unit, estimatedValue}] with an optional `total_value`.
receipt_issued only ever flips from false to true.
"""

from datetime import datetime

from sqlalchemy import JSON, Boolean, DateTime, Index, Numeric, String, Text, false, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.mixins import IntegerPKMixin, TimestampMixin, utcnow


class Donation(IntegerPKMixin, TimestampMixin, Base):
    __tablename__ = "donations"

    donor_name: Mapped[str] = mapped_column(String(100), nullable=False)
    donor_type: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="individual",
        server_default=text("'individual'"),
        comment="individual, organization",
    )
    amount: Mapped[float] = mapped_column(
        Numeric(10, 2, asdecimal=False), nullable=False, default=0, server_default=text("0"),
    )
    donation_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )
    donation_type: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="money",
        server_default=text("'money'"),
        comment="money, goods",
    )
    purpose: Mapped[str | None] = mapped_column(String(100))
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="pending",
        server_default=text("'pending'"),
        comment="pending, confirmed, cancelled",
    )
    payment_method: Mapped[str | None] = mapped_column(String(50))
    transaction_id: Mapped[str | None] = mapped_column(String(100))
    remarks: Mapped[str | None] = mapped_column(Text)
    receipt_issued: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false(),
    )
    items: Mapped[list | None] = mapped_column(JSON)
    total_value: Mapped[float | None] = mapped_column(Numeric(10, 2, asdecimal=False))

    __table_args__ = (
        Index("idx_donations_donation_date", "donation_date"),
        Index("idx_donations_status", "status"),
    )

    def __repr__(self) -> str:
        return (
            f"<Donation(id={self.id}, donor='{self.donor_name}', "
            f"amount={self.amount}, status='{self.status}')>"
        )
