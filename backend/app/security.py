"""
Shelter Admin Backend — Password Hashing & Bearer Tokens
==========================================================

What:  Salted one-way password hashes and signed, time-limited access tokens.
How:   passlib's CryptContext for hashes; PyJWT (HS256 by default) for tokens.
Who:   AuthService and UserService hash/verify; the `get_current_user`
       dependency decodes tokens on every protected request.

Token claims:
    sub       user id (string, as JWT requires)
    username  login name at issue time
    role      admin | staff | volunteer
    iat, exp  issue and expiry timestamps (UTC)

The signing secret lives only inside a TokenSigner instance. Routes receive
the signer through the `get_token_signer` dependency, so tests can swap in
one built with their own secret and lifetime.
"""

import logging
from datetime import datetime, timedelta, timezone
from functools import lru_cache

import jwt
from passlib.context import CryptContext

from app.config import settings
from app.exceptions import AuthenticationError
from app.models.user import User
from app.schemas.auth import TokenClaims

logger = logging.getLogger(__name__)

# pbkdf2_sha256 is pure Python in passlib and needs no native backend
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """False for a wrong password and for a hash passlib cannot identify."""
    try:
        return pwd_context.verify(password, password_hash)
    except ValueError:
        logger.warning("Stored password hash has an unrecognized format")
        return False


class TokenSigner:
    """
    Issues and verifies bearer tokens.

    Args:
        secret:      HMAC signing key.
        algorithm:   JWT algorithm name.
        expires_in:  Token lifetime in seconds.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expires_in: int = 86400):
        self._secret = secret
        self.algorithm = algorithm
        self.expires_in = expires_in

    def issue(self, user: User) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "sub": str(user.id),
            "username": user.username,
            "role": user.role,
            "iat": now,
            "exp": now + timedelta(seconds=self.expires_in),
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def decode(self, token: str) -> TokenClaims:
        """
        Verifies signature and expiry.

        Raises:
            AuthenticationError: "Token expired" or "Invalid token".
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError:
            raise AuthenticationError("Token expired")
        except jwt.InvalidTokenError:
            raise AuthenticationError("Invalid token")

        try:
            return TokenClaims(
                user_id=int(payload["sub"]),
                username=payload.get("username", ""),
                role=payload.get("role", ""),
            )
        except ValueError:
            raise AuthenticationError("Invalid token")

    def __repr__(self) -> str:
        return f"<TokenSigner(algorithm='{self.algorithm}', expires_in={self.expires_in})>"


@lru_cache
def get_token_signer() -> TokenSigner:
    """FastAPI dependency: the process-wide signer built from settings."""
    return TokenSigner(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expires_in=settings.jwt_expires_in,
    )
