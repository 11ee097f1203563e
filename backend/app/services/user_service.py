"""
Shelter Admin Backend — User Service
======================================

What:  Account administration: CRUD, freeze/unfreeze, password resets,
       self-service profile edits, and account stats.
Who:   routes/users.py; AuthService reuses `create_account` for registration.

Passwords are hashed here and nowhere else; no method returns a hash.
Username uniqueness is checked up front for a friendly 409, and the
unique constraint catches the race two concurrent creators could win.
"""

import logging
from typing import Any, Dict, Optional

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import ConflictError
from app.models.user import User
from app.schemas.common import MessageResponse
from app.schemas.user import (
    ProfileUpdate,
    UserCreate,
    UserQuery,
    UserResponse,
    UserStats,
    UserUpdate,
)
from app.security import hash_password
from app.services.base import CrudService, contains, count_where, equals
from app.services.transitions import USER_STATUS

logger = logging.getLogger(__name__)


class UserService(CrudService[User, UserResponse]):
    model = User
    response_schema = UserResponse
    resource = "User"
    order_column = "create_time"

    async def find_by_username(self, db: AsyncSession, username: str) -> Optional[User]:
        result = await db.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def _ensure_username_free(
        self, db: AsyncSession, username: str, exclude_id: Optional[int] = None
    ) -> None:
        stmt = select(User.id).where(User.username == username)
        if exclude_id is not None:
            stmt = stmt.where(User.id != exclude_id)
        if (await db.execute(stmt)).first() is not None:
            raise ConflictError(
                f"Username '{username}' is already taken",
                context={"username": username},
            )

    async def create_account(self, db: AsyncSession, values: Dict[str, Any]) -> User:
        """
        Inserts a user from plain values; `password` is hashed on the way in.

        Raises:
            ConflictError: the username is taken.
        """
        await self._ensure_username_free(db, values["username"])
        password = values.pop("password")
        row = User(
            **values,
            password_hash=hash_password(password),
            status=USER_STATUS.initial,
        )
        try:
            async with db.begin_nested():
                db.add(row)
                await db.flush()
        except IntegrityError:
            raise ConflictError(f"Username '{values['username']}' is already taken")
        await db.refresh(row)
        logger.info("User created: %s (%s)", row.username, row.role)
        return row

    async def create(self, db: AsyncSession, payload: UserCreate) -> UserResponse:
        return self.to_response(await self.create_account(db, payload.model_dump()))

    async def list(self, db: AsyncSession, query: UserQuery):
        search = None
        if query.search:
            search = or_(
                contains(User.username, query.search),
                contains(User.real_name, query.search),
                contains(User.email, query.search),
            )
        return await self.paginate(
            db,
            query,
            filters=[
                search,
                equals(User.role, query.role),
                equals(User.status, query.status),
            ],
        )

    async def update(self, db: AsyncSession, user_id: int, payload: UserUpdate) -> UserResponse:
        changes = self.changes_from(payload)
        if "username" in changes:
            await self._ensure_username_free(db, changes["username"], exclude_id=user_id)
        if "password" in changes:
            changes["password_hash"] = hash_password(changes.pop("password"))
        row = await self.update_row(db, user_id, changes)
        return self.to_response(row)

    async def update_profile(
        self, db: AsyncSession, user: User, payload: ProfileUpdate
    ) -> UserResponse:
        row = await self.update_row(db, user.id, self.changes_from(payload))
        return self.to_response(row)

    async def set_status(self, db: AsyncSession, user_id: int, target: str) -> UserResponse:
        current = await self.get_row(db, user_id)
        USER_STATUS.ensure(current.status, target)
        row = await self.update_row(db, user_id, {"status": target})
        logger.info("User %s status %s -> %s", current.username, current.status, target)
        return self.to_response(row)

    async def freeze(self, db: AsyncSession, user_id: int) -> UserResponse:
        return await self.set_status(db, user_id, "locked")

    async def unfreeze(self, db: AsyncSession, user_id: int) -> UserResponse:
        return await self.set_status(db, user_id, "active")

    async def reset_password(
        self, db: AsyncSession, user_id: int, new_password: str
    ) -> MessageResponse:
        await self.update_row(db, user_id, {"password_hash": hash_password(new_password)})
        logger.info("Password reset for user %d", user_id)
        return MessageResponse(message="Password reset successfully", id=user_id)

    async def stats(self, db: AsyncSession) -> UserStats:
        counts = await self.aggregate(
            db,
            total=func.count(),
            active=count_where(User.status == "active"),
            inactive=count_where(User.status == "inactive"),
            locked=count_where(User.status == "locked"),
            admin=count_where(User.role == "admin"),
            staff=count_where(User.role == "staff"),
            volunteer=count_where(User.role == "volunteer"),
        )
        return UserStats(**counts)


# ── Singleton ─────────────────────────────────────────────────────────────
user_service = UserService()
