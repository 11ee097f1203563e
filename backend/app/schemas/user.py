"""
Shelter Admin Backend — User Schemas
======================================

What:  Account management bodies and the public user projection.

UserResponse deliberately has no password field; ORM rows pass through it
on the way out, so the hash cannot leak by accident.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import EmailStr, Field

from app.schemas.common import CamelModel, ListQuery, RequestModel

UserRole = Literal["admin", "staff", "volunteer"]
UserStatus = Literal["active", "inactive", "locked"]

PASSWORD_MIN_LENGTH = 6


class UserCreate(RequestModel):
    username: str = Field(min_length=3, max_length=50, pattern=r"^[A-Za-z0-9_.-]+$")
    password: str = Field(min_length=PASSWORD_MIN_LENGTH, max_length=128)
    real_name: str = Field(min_length=1, max_length=100)
    role: UserRole = "staff"
    avatar: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=20)
    email: Optional[EmailStr] = None


class UserUpdate(RequestModel):
    username: Optional[str] = Field(
        default=None, min_length=3, max_length=50, pattern=r"^[A-Za-z0-9_.-]+$",
    )
    password: Optional[str] = Field(default=None, min_length=PASSWORD_MIN_LENGTH, max_length=128)
    real_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    role: Optional[UserRole] = None
    avatar: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=20)
    email: Optional[EmailStr] = None
    status: Optional[UserStatus] = None


class ProfileUpdate(RequestModel):
    """What a signed-in user may change about themselves."""

    real_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    avatar: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=20)
    email: Optional[EmailStr] = None


class PasswordReset(RequestModel):
    new_password: str = Field(min_length=PASSWORD_MIN_LENGTH, max_length=128)


class UserQuery(ListQuery):
    search: Optional[str] = Field(default=None, description="Matches username, real name or email")
    role: Optional[UserRole] = None
    status: Optional[UserStatus] = None


class UserResponse(CamelModel):
    id: int
    username: str
    real_name: str
    role: str
    avatar: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    status: str
    create_time: datetime
    update_time: datetime


class UserStats(CamelModel):
    total: int
    active: int
    inactive: int
    locked: int
    admin: int
    staff: int
    volunteer: int
