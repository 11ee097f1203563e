"""
Shelter Admin Backend — User Route Handlers
=============================================

What:  Account administration and the signed-in user's own profile.
Who:   Admin console user management page and profile menu.

Route order matters: /users/me and /users/stats are declared before
/users/{user_id} so they are not parsed as ids.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.dependencies import get_current_user, parse_query
from app.models.user import User
from app.routes import ok
from app.schemas.common import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    ApiResponse,
    ErrorResponse,
    MessageResponse,
    Page,
)
from app.schemas.user import (
    PasswordReset,
    ProfileUpdate,
    UserCreate,
    UserQuery,
    UserResponse,
    UserRole,
    UserStats,
    UserStatus,
    UserUpdate,
)
from app.services.user_service import user_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/users",
    tags=["Users"],
    dependencies=[Depends(get_current_user)],
    responses={
        400: {"description": "Invalid input", "model": ErrorResponse},
        401: {"description": "Not signed in", "model": ErrorResponse},
    },
)

_NOT_FOUND = {404: {"description": "User not found", "model": ErrorResponse}}
_CONFLICT = {409: {"description": "Username already taken", "model": ErrorResponse}}


def user_query(
    page: int = Query(default=1, ge=1),
    limit: Optional[int] = Query(default=None, ge=1, le=MAX_PAGE_SIZE),
    page_size: Optional[int] = Query(
        default=None, ge=1, le=MAX_PAGE_SIZE, alias="pageSize", description="Alias of limit",
    ),
    search: Optional[str] = Query(default=None, description="Username, real name or email"),
    role: Optional[UserRole] = Query(default=None),
    status: Optional[UserStatus] = Query(default=None),
) -> UserQuery:
    return parse_query(
        UserQuery,
        page=page,
        limit=limit or page_size or DEFAULT_PAGE_SIZE,
        search=search,
        role=role,
        status=status,
    )


@router.post(
    "",
    status_code=201,
    response_model=ApiResponse[UserResponse],
    responses=_CONFLICT,
    summary="Create a user",
)
async def create_user(payload: UserCreate, db: AsyncSession = Depends(get_db_session)):
    return ok(await user_service.create(db, payload), code=201)


@router.get(
    "",
    response_model=ApiResponse[Page[UserResponse]],
    summary="List users",
    description="Newest accounts first. pageSize is accepted in place of limit.",
)
async def list_users(
    query: UserQuery = Depends(user_query),
    db: AsyncSession = Depends(get_db_session),
):
    return ok(await user_service.list(db, query))


@router.get("/me", response_model=ApiResponse[UserResponse], summary="The signed-in user")
async def get_me(user: User = Depends(get_current_user)):
    return ok(UserResponse.model_validate(user))


@router.patch(
    "/me",
    response_model=ApiResponse[UserResponse],
    summary="Edit own profile",
    description="realName, avatar, phone and email only.",
)
async def update_me(
    payload: ProfileUpdate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
):
    return ok(await user_service.update_profile(db, user, payload))


@router.get("/stats", response_model=ApiResponse[UserStats], summary="Account counts by status and role")
async def user_stats(db: AsyncSession = Depends(get_db_session)):
    return ok(await user_service.stats(db))


@router.get(
    "/{user_id}",
    response_model=ApiResponse[UserResponse],
    responses=_NOT_FOUND,
    summary="Get a user",
)
async def get_user(user_id: int = Path(ge=1), db: AsyncSession = Depends(get_db_session)):
    return ok(await user_service.get(db, user_id))


@router.put(
    "/{user_id}",
    response_model=ApiResponse[UserResponse],
    responses={**_NOT_FOUND, **_CONFLICT},
    summary="Update a user",
    description="Only supplied fields change. A supplied password is re-hashed.",
)
async def update_user(
    payload: UserUpdate,
    user_id: int = Path(ge=1),
    db: AsyncSession = Depends(get_db_session),
):
    return ok(await user_service.update(db, user_id, payload))


@router.delete(
    "/{user_id}",
    response_model=ApiResponse[MessageResponse],
    responses=_NOT_FOUND,
    summary="Delete a user",
)
async def delete_user(user_id: int = Path(ge=1), db: AsyncSession = Depends(get_db_session)):
    return ok(await user_service.delete(db, user_id))


@router.post(
    "/{user_id}/freeze",
    response_model=ApiResponse[UserResponse],
    responses=_NOT_FOUND,
    summary="Lock an account",
)
async def freeze_user(user_id: int = Path(ge=1), db: AsyncSession = Depends(get_db_session)):
    return ok(await user_service.freeze(db, user_id))


@router.post(
    "/{user_id}/unfreeze",
    response_model=ApiResponse[UserResponse],
    responses=_NOT_FOUND,
    summary="Reactivate an account",
)
async def unfreeze_user(user_id: int = Path(ge=1), db: AsyncSession = Depends(get_db_session)):
    return ok(await user_service.unfreeze(db, user_id))


@router.post(
    "/{user_id}/reset-password",
    response_model=ApiResponse[MessageResponse],
    responses=_NOT_FOUND,
    summary="Set a new password",
)
async def reset_password(
    payload: PasswordReset,
    user_id: int = Path(ge=1),
    db: AsyncSession = Depends(get_db_session),
):
    return ok(await user_service.reset_password(db, user_id, payload.new_password))
