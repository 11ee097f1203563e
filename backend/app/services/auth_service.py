"""
Shelter Admin Backend — Authentication Service
================================================

What:  Login (credential check + token issue) and self-registration.
Who:   routes/auth.py.

Login rejections:
    unknown username or wrong password  → 401 "Invalid username or password"
    correct credentials, status != active → 401 "Account is disabled"

The first message is the same for both causes so callers cannot probe
which usernames exist. Passwords are never logged.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import AuthenticationError
from app.schemas.auth import LoginRequest, LoginResponse, RegisterRequest, UserProfile
from app.schemas.user import UserResponse
from app.security import TokenSigner, verify_password
from app.services.user_service import user_service

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username or password"
ACCOUNT_DISABLED = "Account is disabled"


class AuthService:
    async def login(
        self, db: AsyncSession, payload: LoginRequest, signer: TokenSigner
    ) -> LoginResponse:
        user = await user_service.find_by_username(db, payload.username)
        if user is None or not verify_password(payload.password, user.password_hash):
            logger.warning("Rejected login for username '%s'", payload.username)
            raise AuthenticationError(INVALID_CREDENTIALS)
        if user.status != "active":
            logger.warning("Login attempt on %s account '%s'", user.status, user.username)
            raise AuthenticationError(ACCOUNT_DISABLED)

        logger.info("User '%s' logged in", user.username)
        return LoginResponse(
            access_token=signer.issue(user),
            token_type="bearer",
            expires_in=signer.expires_in,
            user=UserProfile.model_validate(user),
        )

    async def register(self, db: AsyncSession, payload: RegisterRequest) -> UserResponse:
        values = payload.model_dump()
        values["real_name"] = values.get("real_name") or payload.username
        user = await user_service.create_account(db, values)
        return UserResponse.model_validate(user)


auth_service = AuthService()
