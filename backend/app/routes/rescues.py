"""Shelter Admin Backend — Rescue Route Handlers"""

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
from app.schemas.rescue import RescueCreate, RescueQuery, RescueResponse, RescueStats, RescueUpdate
from app.services.rescue_service import rescue_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/rescues",
    tags=["Rescues"],
    dependencies=[Depends(get_current_user)],
    responses={
        400: {"description": "Invalid input", "model": ErrorResponse},
        401: {"description": "Not signed in", "model": ErrorResponse},
    },
)

_NOT_FOUND = {404: {"description": "Rescue not found", "model": ErrorResponse}}


def rescue_query(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    rescuer: Optional[str] = Query(default=None, description="Substring match"),
    rescue_type: Optional[str] = Query(default=None, alias="rescueType"),
    health_condition: Optional[str] = Query(default=None, alias="healthCondition"),
    rescue_location: Optional[str] = Query(
        default=None, alias="rescueLocation", description="Substring match"
    ),
) -> RescueQuery:
    return parse_query(
        RescueQuery,
        page=page,
        limit=limit,
        rescuer=rescuer,
        rescue_type=rescue_type,
        health_condition=health_condition,
        rescue_location=rescue_location,
    )


@router.post("", status_code=201, response_model=ApiResponse[RescueResponse], summary="Log a rescue")
async def create_rescue(payload: RescueCreate, db: AsyncSession = Depends(get_db_session)):
    return ok(await rescue_service.create(db, payload), code=201)


@router.get(
    "",
    response_model=ApiResponse[Page[RescueResponse]],
    summary="List rescues",
    description="Newest rescueDate first.",
)
async def list_rescues(
    query: RescueQuery = Depends(rescue_query),
    db: AsyncSession = Depends(get_db_session),
):
    return ok(await rescue_service.list(db, query))


@router.get("/stats", response_model=ApiResponse[RescueStats], summary="Rescue counts and total cost")
async def rescue_stats(db: AsyncSession = Depends(get_db_session)):
    return ok(await rescue_service.stats(db))


@router.get(
    "/{rescue_id}",
    response_model=ApiResponse[RescueResponse],
    responses=_NOT_FOUND,
    summary="Get a rescue",
)
async def get_rescue(rescue_id: int = Path(ge=1), db: AsyncSession = Depends(get_db_session)):
    return ok(await rescue_service.get(db, rescue_id))


@router.patch(
    "/{rescue_id}",
    response_model=ApiResponse[RescueResponse],
    responses=_NOT_FOUND,
    summary="Update a rescue",
)
async def update_rescue(
    payload: RescueUpdate,
    rescue_id: int = Path(ge=1),
    db: AsyncSession = Depends(get_db_session),
):
    return ok(await rescue_service.update(db, rescue_id, payload))


@router.delete(
    "/{rescue_id}",
    response_model=ApiResponse[MessageResponse],
    responses=_NOT_FOUND,
    summary="Delete a rescue",
)
async def delete_rescue(rescue_id: int = Path(ge=1), db: AsyncSession = Depends(get_db_session)):
    return ok(await rescue_service.delete(db, rescue_id))
