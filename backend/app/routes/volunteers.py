"""Shelter Admin Backend — Volunteer Route Handlers"""

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
from app.schemas.volunteer import (
    HoursLog,
    VolunteerCreate,
    VolunteerQuery,
    VolunteerResponse,
    VolunteerStats,
    VolunteerStatus,
    VolunteerUpdate,
)
from app.services.volunteer_service import volunteer_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/volunteers",
    tags=["Volunteers"],
    dependencies=[Depends(get_current_user)],
    responses={
        400: {"description": "Invalid input", "model": ErrorResponse},
        401: {"description": "Not signed in", "model": ErrorResponse},
    },
)

_NOT_FOUND = {404: {"description": "Volunteer not found", "model": ErrorResponse}}


def volunteer_query(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    status: Optional[VolunteerStatus] = Query(default=None),
    name: Optional[str] = Query(default=None, description="Substring match"),
    skills: Optional[str] = Query(default=None, description="Substring of any skill"),
) -> VolunteerQuery:
    return parse_query(
        VolunteerQuery, page=page, limit=limit, status=status, name=name, skills=skills,
    )


@router.post(
    "",
    status_code=201,
    response_model=ApiResponse[VolunteerResponse],
    summary="Add a volunteer",
)
async def create_volunteer(payload: VolunteerCreate, db: AsyncSession = Depends(get_db_session)):
    return ok(await volunteer_service.create(db, payload), code=201)


@router.get(
    "",
    response_model=ApiResponse[Page[VolunteerResponse]],
    summary="List volunteers",
    description="Most recent joinDate first.",
)
async def list_volunteers(
    query: VolunteerQuery = Depends(volunteer_query),
    db: AsyncSession = Depends(get_db_session),
):
    return ok(await volunteer_service.list(db, query))


@router.get("/stats", response_model=ApiResponse[VolunteerStats], summary="Volunteer counts and hours")
async def volunteer_stats(db: AsyncSession = Depends(get_db_session)):
    return ok(await volunteer_service.stats(db))


@router.get(
    "/{volunteer_id}",
    response_model=ApiResponse[VolunteerResponse],
    responses=_NOT_FOUND,
    summary="Get a volunteer",
)
async def get_volunteer(volunteer_id: int = Path(ge=1), db: AsyncSession = Depends(get_db_session)):
    return ok(await volunteer_service.get(db, volunteer_id))


@router.patch(
    "/{volunteer_id}",
    response_model=ApiResponse[VolunteerResponse],
    responses=_NOT_FOUND,
    summary="Update a volunteer",
)
async def update_volunteer(
    payload: VolunteerUpdate,
    volunteer_id: int = Path(ge=1),
    db: AsyncSession = Depends(get_db_session),
):
    return ok(await volunteer_service.update(db, volunteer_id, payload))


@router.delete(
    "/{volunteer_id}",
    response_model=ApiResponse[MessageResponse],
    responses=_NOT_FOUND,
    summary="Delete a volunteer",
)
async def delete_volunteer(volunteer_id: int = Path(ge=1), db: AsyncSession = Depends(get_db_session)):
    return ok(await volunteer_service.delete(db, volunteer_id))


@router.post(
    "/{volunteer_id}/hours",
    response_model=ApiResponse[VolunteerResponse],
    responses=_NOT_FOUND,
    summary="Log hours for one completed activity",
    description="Adds the hours to totalHours and counts one more activity, in one update.",
)
async def log_hours(
    payload: HoursLog,
    volunteer_id: int = Path(ge=1),
    db: AsyncSession = Depends(get_db_session),
):
    return ok(await volunteer_service.log_hours(db, volunteer_id, payload.hours))
