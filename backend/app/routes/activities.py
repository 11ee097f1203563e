"""
Shelter Admin Backend — Activity Route Handlers
=================================================

What:  /activities CRUD plus join/leave sign-up counting.

Join answers 400 once participantCount has reached participantLimit;
leave never takes the count below zero.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.dependencies import get_current_user, parse_query
from app.routes import ok
from app.schemas.activity import (
    ActivityCreate,
    ActivityQuery,
    ActivityResponse,
    ActivityStats,
    ActivityStatus,
    ActivityType,
    ActivityUpdate,
)
from app.schemas.common import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    ApiResponse,
    ErrorResponse,
    MessageResponse,
    Page,
)
from app.services.activity_service import activity_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/activities",
    tags=["Activities"],
    dependencies=[Depends(get_current_user)],
    responses={
        400: {"description": "Invalid input or activity full", "model": ErrorResponse},
        401: {"description": "Not signed in", "model": ErrorResponse},
    },
)

_NOT_FOUND = {404: {"description": "Activity not found", "model": ErrorResponse}}


def activity_query(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    type: Optional[ActivityType] = Query(default=None),
    status: Optional[ActivityStatus] = Query(default=None),
    title: Optional[str] = Query(default=None, description="Substring match"),
    location: Optional[str] = Query(default=None, description="Substring match"),
) -> ActivityQuery:
    return parse_query(
        ActivityQuery,
        page=page,
        limit=limit,
        type=type,
        status=status,
        title=title,
        location=location,
    )


@router.post(
    "",
    status_code=201,
    response_model=ApiResponse[ActivityResponse],
    summary="Create an activity",
    description="Starts as upcoming with participantCount 0. Omit participantLimit for no cap.",
)
async def create_activity(payload: ActivityCreate, db: AsyncSession = Depends(get_db_session)):
    return ok(await activity_service.create(db, payload), code=201)


@router.get(
    "",
    response_model=ApiResponse[Page[ActivityResponse]],
    summary="List activities",
    description="Latest startDate first.",
)
async def list_activities(
    query: ActivityQuery = Depends(activity_query),
    db: AsyncSession = Depends(get_db_session),
):
    return ok(await activity_service.list(db, query))


@router.get("/stats", response_model=ApiResponse[ActivityStats], summary="Activity counts")
async def activity_stats(db: AsyncSession = Depends(get_db_session)):
    return ok(await activity_service.stats(db))


@router.get(
    "/{activity_id}",
    response_model=ApiResponse[ActivityResponse],
    responses=_NOT_FOUND,
    summary="Get an activity",
)
async def get_activity(activity_id: int = Path(ge=1), db: AsyncSession = Depends(get_db_session)):
    return ok(await activity_service.get(db, activity_id))


@router.patch(
    "/{activity_id}",
    response_model=ApiResponse[ActivityResponse],
    responses=_NOT_FOUND,
    summary="Update an activity",
)
async def update_activity(
    payload: ActivityUpdate,
    activity_id: int = Path(ge=1),
    db: AsyncSession = Depends(get_db_session),
):
    return ok(await activity_service.update(db, activity_id, payload))


@router.delete(
    "/{activity_id}",
    response_model=ApiResponse[MessageResponse],
    responses=_NOT_FOUND,
    summary="Delete an activity",
)
async def delete_activity(activity_id: int = Path(ge=1), db: AsyncSession = Depends(get_db_session)):
    return ok(await activity_service.delete(db, activity_id))


@router.post(
    "/{activity_id}/join",
    response_model=ApiResponse[ActivityResponse],
    responses=_NOT_FOUND,
    summary="Sign up one participant",
)
async def join_activity(activity_id: int = Path(ge=1), db: AsyncSession = Depends(get_db_session)):
    return ok(await activity_service.join(db, activity_id))


@router.post(
    "/{activity_id}/leave",
    response_model=ApiResponse[ActivityResponse],
    responses=_NOT_FOUND,
    summary="Remove one participant",
)
async def leave_activity(activity_id: int = Path(ge=1), db: AsyncSession = Depends(get_db_session)):
    return ok(await activity_service.leave(db, activity_id))
