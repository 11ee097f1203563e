"""
Shelter Admin Backend — Pet Route Handlers
============================================

What:  /pets CRUD, the favorite counter, and pet stats.
Who:   Admin console pet list and detail pages.

Note: GET /pets/{id} is not a pure read. Each call increments viewCount.
"""

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
from app.schemas.pet import (
    AdoptionStatus,
    Gender,
    HealthStatus,
    PetCreate,
    PetQuery,
    PetResponse,
    PetStats,
    PetType,
    PetUpdate,
)
from app.services.pet_service import pet_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/pets",
    tags=["Pets"],
    dependencies=[Depends(get_current_user)],
    responses={
        400: {"description": "Invalid input", "model": ErrorResponse},
        401: {"description": "Not signed in", "model": ErrorResponse},
    },
)

_NOT_FOUND = {404: {"description": "Pet not found", "model": ErrorResponse}}


def pet_query(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    type: Optional[PetType] = Query(default=None),
    gender: Optional[Gender] = Query(default=None),
    health_status: Optional[HealthStatus] = Query(default=None, alias="healthStatus"),
    adoption_status: Optional[AdoptionStatus] = Query(default=None, alias="adoptionStatus"),
    location: Optional[str] = Query(default=None, description="Substring match"),
) -> PetQuery:
    return parse_query(
        PetQuery,
        page=page,
        limit=limit,
        type=type,
        gender=gender,
        health_status=health_status,
        adoption_status=adoption_status,
        location=location,
    )


@router.post(
    "",
    status_code=201,
    response_model=ApiResponse[PetResponse],
    summary="Register a pet",
    description="Creates a pet. Statuses default to healthy/available and both counters start at 0.",
)
async def create_pet(
    payload: PetCreate,
    db: AsyncSession = Depends(get_db_session),
):
    return ok(await pet_service.create(db, payload), code=201)


@router.get(
    "",
    response_model=ApiResponse[Page[PetResponse]],
    summary="List pets",
    description="Filters combine with AND. Newest first.",
)
async def list_pets(
    query: PetQuery = Depends(pet_query),
    db: AsyncSession = Depends(get_db_session),
):
    return ok(await pet_service.list(db, query))


@router.get("/stats", response_model=ApiResponse[PetStats], summary="Pet counts")
async def pet_stats(db: AsyncSession = Depends(get_db_session)):
    return ok(await pet_service.stats(db))


@router.get(
    "/{pet_id}",
    response_model=ApiResponse[PetResponse],
    responses=_NOT_FOUND,
    summary="Get a pet",
    description="Returns one pet and increments its viewCount by one.",
)
async def get_pet(
    pet_id: int = Path(ge=1),
    db: AsyncSession = Depends(get_db_session),
):
    return ok(await pet_service.view(db, pet_id))


@router.patch(
    "/{pet_id}",
    response_model=ApiResponse[PetResponse],
    responses=_NOT_FOUND,
    summary="Update a pet",
    description="Writes only the fields present in the body.",
)
async def update_pet(
    payload: PetUpdate,
    pet_id: int = Path(ge=1),
    db: AsyncSession = Depends(get_db_session),
):
    return ok(await pet_service.update(db, pet_id, payload))


@router.delete(
    "/{pet_id}",
    response_model=ApiResponse[MessageResponse],
    responses=_NOT_FOUND,
    summary="Delete a pet",
)
async def delete_pet(
    pet_id: int = Path(ge=1),
    db: AsyncSession = Depends(get_db_session),
):
    return ok(await pet_service.delete(db, pet_id))


@router.post(
    "/{pet_id}/favorite",
    response_model=ApiResponse[PetResponse],
    responses=_NOT_FOUND,
    summary="Favorite a pet",
)
async def favorite_pet(
    pet_id: int = Path(ge=1),
    db: AsyncSession = Depends(get_db_session),
):
    return ok(await pet_service.add_favorite(db, pet_id))


@router.delete(
    "/{pet_id}/favorite",
    response_model=ApiResponse[PetResponse],
    responses=_NOT_FOUND,
    summary="Unfavorite a pet",
    description="Decrements favoriteCount; stays at 0 instead of going negative.",
)
async def unfavorite_pet(
    pet_id: int = Path(ge=1),
    db: AsyncSession = Depends(get_db_session),
):
    return ok(await pet_service.remove_favorite(db, pet_id))
