"""
Shelter Admin Backend — Shared Route Dependencies
===================================================

What:  The bearer-token guard and the query-parameter model builder.
Who:   Every protected router (`dependencies=[Depends(get_current_user)]`)
       and every list endpoint.
"""

from typing import Any, Optional, Type, TypeVar

from fastapi import Depends
from fastapi.exceptions import RequestValidationError
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel, ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.exceptions import AuthenticationError
from app.models.user import User
from app.security import TokenSigner, get_token_signer

Q = TypeVar("Q", bound=BaseModel)

# auto_error=False: a missing header reaches get_current_user as None, so the
# 401 goes through our envelope instead of FastAPI's default 403
bearer_scheme = HTTPBearer(auto_error=False, description="Token from POST /auth/login")


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db_session),
    signer: TokenSigner = Depends(get_token_signer),
) -> User:
    """
    Resolves the signed-in user from the Authorization header.

    The user row is reloaded on every request, so deleting or freezing an
    account takes effect before its tokens expire.

    Raises:
        AuthenticationError: missing/expired/invalid token, deleted user,
                             or a user whose status is not active.
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Authentication required")

    claims = signer.decode(credentials.credentials)

    user = await db.get(User, claims.user_id)
    if user is None:
        raise AuthenticationError("User no longer exists")
    if user.status != "active":
        raise AuthenticationError("Account is disabled")
    return user


def parse_query(model: Type[Q], **params: Any) -> Q:
    """
    Builds a query model from already-parsed query parameters.

    Cross-field rules (date ranges) live on the model; their failures are
    re-raised as request validation errors so they answer 400 like any
    other bad parameter.
    """
    try:
        return model(**params)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors()) from exc
