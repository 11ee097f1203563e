"""Shelter Admin Backend — Authentication Schemas"""

from typing import Optional

from pydantic import EmailStr, Field

from app.schemas.common import CamelModel, RequestModel
from app.schemas.user import PASSWORD_MIN_LENGTH, UserRole


class LoginRequest(RequestModel):
    username: str = Field(min_length=1, max_length=50)
    password: str = Field(min_length=1, max_length=128)


class RegisterRequest(RequestModel):
    """
    Self-service account creation.

    The caller may choose any role, admin included; it defaults to staff.
    """

    username: str = Field(min_length=3, max_length=50, pattern=r"^[A-Za-z0-9_.-]+$")
    password: str = Field(min_length=PASSWORD_MIN_LENGTH, max_length=128)
    real_name: Optional[str] = Field(default=None, max_length=100, description="Defaults to the username")
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, max_length=20)
    role: UserRole = "staff"


class UserProfile(CamelModel):
    """Public-safe projection returned alongside a token."""

    id: int
    username: str
    real_name: str
    role: str
    avatar: Optional[str] = None


class LoginResponse(CamelModel):
    access_token: str = Field(alias="access_token")
    token_type: str = Field(default="bearer", alias="token_type")
    expires_in: int = Field(alias="expires_in", description="Token lifetime in seconds")
    user: UserProfile


class TokenClaims(CamelModel):
    """Decoded bearer token payload."""

    user_id: int
    username: str
    role: str
