"""
Shelter Admin Backend — Shared Model Columns
==============================================

What:  Columns every shelter table carries.
How:   Declarative mixin; each model lists it before `Base`.

create_time is stamped on INSERT, update_time on INSERT and on every ORM
flush or Core UPDATE issued through the ORM. Services that write with
`update()` statements also set update_time explicitly.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, text
from sqlalchemy.orm import Mapped, mapped_column


def utcnow() -> datetime:
    """Timezone-aware current time; every timestamp in the schema is UTC."""
    return datetime.now(timezone.utc)


class IntegerPKMixin:
    """Auto-incrementing integer primary key used by all tables except adoption records."""

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Surrogate key",
    )


class TimestampMixin:
    create_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        comment="When the row was inserted (UTC)",
    )
    update_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        comment="When the row was last modified (UTC)",
    )
