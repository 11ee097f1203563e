"""
Shelter Admin Backend — User Model
====================================

What:  Staff accounts that can sign in to the admin console.
Who:   UserService (CRUD, freeze/unfreeze), AuthService (login/register),
       and the bearer-token dependency, which reloads the user per request.

The `password_hash` column holds a passlib hash string. No response schema
exposes it.
"""

from sqlalchemy import Index, String, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.mixins import IntegerPKMixin, TimestampMixin


class User(IntegerPKMixin, TimestampMixin, Base):
    __tablename__ = "users"

    username: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        unique=True,
        comment="Login name, unique across all accounts",
    )
    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Salted one-way hash (passlib format)",
    )
    real_name: Mapped[str] = mapped_column(String(100), nullable=False)
    role: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="staff",
        server_default=text("'staff'"),
        comment="admin, staff, volunteer",
    )
    avatar: Mapped[str | None] = mapped_column(String(255))
    phone: Mapped[str | None] = mapped_column(String(20))
    email: Mapped[str | None] = mapped_column(String(100))
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="active",
        server_default=text("'active'"),
        comment="active, inactive, locked",
    )

    __table_args__ = (
        Index("idx_users_create_time", "create_time"),
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}', role='{self.role}')>"
