"""Shelter Admin Backend — Notification Route Handlers"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.dependencies import get_current_user, parse_query
from app.routes import ok
from app.schemas.common import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    ApiResponse,
    ErrorResponse,
    MessageResponse,
    Page,
)
from app.schemas.notification import (
    NotificationCreate,
    NotificationQuery,
    NotificationResponse,
    NotificationStats,
    NotificationType,
    NotificationUpdate,
    UnreadCount,
)
from app.services.notification_service import notification_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/notifications",
    tags=["Notifications"],
    dependencies=[Depends(get_current_user)],
    responses={
        400: {"description": "Invalid input", "model": ErrorResponse},
        401: {"description": "Not signed in", "model": ErrorResponse},
    },
)

_NOT_FOUND = {404: {"description": "Notification not found", "model": ErrorResponse}}


def notification_query(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    type: Optional[NotificationType] = Query(default=None),
    unread_only: bool = Query(default=False, alias="unreadOnly"),
) -> NotificationQuery:
    return parse_query(NotificationQuery, page=page, limit=limit, type=type, unread_only=unread_only)


@router.post(
    "",
    status_code=201,
    response_model=ApiResponse[NotificationResponse],
    summary="Create a notification",
)
async def create_notification(
    payload: NotificationCreate, db: AsyncSession = Depends(get_db_session)
):
    return ok(await notification_service.create(db, payload), code=201)


@router.get(
    "",
    response_model=ApiResponse[Page[NotificationResponse]],
    summary="List notifications",
    description="Newest first. unreadOnly=true hides read ones.",
)
async def list_notifications(
    query: NotificationQuery = Depends(notification_query),
    db: AsyncSession = Depends(get_db_session),
):
    return ok(await notification_service.list(db, query))


@router.get("/unread-count", response_model=ApiResponse[UnreadCount], summary="Unread count")
async def unread_count(db: AsyncSession = Depends(get_db_session)):
    return ok(await notification_service.unread_count(db))


@router.get("/stats", response_model=ApiResponse[NotificationStats], summary="Notification counts")
async def notification_stats(db: AsyncSession = Depends(get_db_session)):
    return ok(await notification_service.stats(db))


@router.post(
    "/mark-all-read",
    response_model=ApiResponse[MessageResponse],
    summary="Mark every unread notification as read",
)
async def mark_all_read(db: AsyncSession = Depends(get_db_session)):
    return ok(await notification_service.mark_all_read(db))


@router.get(
    "/{notification_id}",
    response_model=ApiResponse[NotificationResponse],
    responses=_NOT_FOUND,
    summary="Get a notification",
)
async def get_notification(
    notification_id: int = Path(ge=1), db: AsyncSession = Depends(get_db_session)
):
    return ok(await notification_service.get(db, notification_id))


@router.patch(
    "/{notification_id}",
    response_model=ApiResponse[NotificationResponse],
    responses=_NOT_FOUND,
    summary="Update a notification",
)
async def update_notification(
    payload: NotificationUpdate,
    notification_id: int = Path(ge=1),
    db: AsyncSession = Depends(get_db_session),
):
    return ok(await notification_service.update(db, notification_id, payload))


@router.delete(
    "/{notification_id}",
    response_model=ApiResponse[MessageResponse],
    responses=_NOT_FOUND,
    summary="Delete a notification",
)
async def delete_notification(
    notification_id: int = Path(ge=1), db: AsyncSession = Depends(get_db_session)
):
    return ok(await notification_service.delete(db, notification_id))


@router.post(
    "/{notification_id}/mark-read",
    response_model=ApiResponse[NotificationResponse],
    responses=_NOT_FOUND,
    summary="Mark a notification as read",
)
async def mark_read(notification_id: int = Path(ge=1), db: AsyncSession = Depends(get_db_session)):
    return ok(await notification_service.mark_read(db, notification_id))
