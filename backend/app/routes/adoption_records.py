"""
Shelter Admin Backend — Adoption Record Route Handlers
========================================================

What:  /adoption-records CRUD and the follow-up log.
Who:   Admin console post-adoption tracking pages.
"""

import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.dependencies import get_current_user, parse_query
from app.models.user import User
from app.routes import ok
from app.schemas.adoption_record import (
    AdoptionRecordCreate,
    AdoptionRecordQuery,
    AdoptionRecordResponse,
    AdoptionRecordStats,
    AdoptionRecordUpdate,
    FollowUpCreate,
    RecordStatus,
)
from app.schemas.common import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    ApiResponse,
    ErrorResponse,
    MessageResponse,
    Page,
)
from app.services.adoption_record_service import adoption_record_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/adoption-records",
    tags=["Adoption Records"],
    dependencies=[Depends(get_current_user)],
    responses={
        400: {"description": "Invalid input", "model": ErrorResponse},
        401: {"description": "Not signed in", "model": ErrorResponse},
    },
)

_NOT_FOUND = {404: {"description": "Record not found", "model": ErrorResponse}}


def record_query(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    status: Optional[RecordStatus] = Query(default=None),
    pet_name: Optional[str] = Query(default=None, alias="petName"),
    adopter_name: Optional[str] = Query(default=None, alias="adopterName"),
    record_number: Optional[str] = Query(default=None, alias="recordNumber"),
    start_date: Optional[date] = Query(default=None, alias="startDate"),
    end_date: Optional[date] = Query(default=None, alias="endDate"),
) -> AdoptionRecordQuery:
    return parse_query(
        AdoptionRecordQuery,
        page=page,
        limit=limit,
        status=status,
        pet_name=pet_name,
        adopter_name=adopter_name,
        record_number=record_number,
        start_date=start_date,
        end_date=end_date,
    )


@router.post(
    "",
    status_code=201,
    response_model=ApiResponse[AdoptionRecordResponse],
    responses={500: {"description": "No free record number", "model": ErrorResponse}},
    summary="Create an adoption record",
    description="Allocates a unique recordNumber (AR-YYYY-NNNNNN); the record starts active.",
)
async def create_record(
    payload: AdoptionRecordCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
):
    record = await adoption_record_service.create(db, payload, operator=user.username)
    return ok(record, code=201)


@router.get(
    "",
    response_model=ApiResponse[Page[AdoptionRecordResponse]],
    summary="List adoption records",
    description="startDate/endDate bound adoptionDate inclusively. Newest adoptionDate first.",
)
async def list_records(
    query: AdoptionRecordQuery = Depends(record_query),
    db: AsyncSession = Depends(get_db_session),
):
    return ok(await adoption_record_service.list(db, query))


@router.get(
    "/stats",
    response_model=ApiResponse[AdoptionRecordStats],
    summary="Adoption record counts",
)
async def record_stats(db: AsyncSession = Depends(get_db_session)):
    return ok(await adoption_record_service.stats(db))


@router.get(
    "/{record_id}",
    response_model=ApiResponse[AdoptionRecordResponse],
    responses=_NOT_FOUND,
    summary="Get an adoption record",
)
async def get_record(record_id: str, db: AsyncSession = Depends(get_db_session)):
    return ok(await adoption_record_service.get(db, record_id))


@router.patch(
    "/{record_id}",
    response_model=ApiResponse[AdoptionRecordResponse],
    responses=_NOT_FOUND,
    summary="Update an adoption record",
)
async def update_record(
    record_id: str,
    payload: AdoptionRecordUpdate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
):
    return ok(await adoption_record_service.update(db, record_id, payload, operator=user.username))


@router.delete(
    "/{record_id}",
    response_model=ApiResponse[MessageResponse],
    responses=_NOT_FOUND,
    summary="Delete an adoption record",
)
async def delete_record(record_id: str, db: AsyncSession = Depends(get_db_session)):
    return ok(await adoption_record_service.delete(db, record_id))


@router.post(
    "/{record_id}/follow-up",
    response_model=ApiResponse[AdoptionRecordResponse],
    responses=_NOT_FOUND,
    summary="Log a follow-up visit",
    description=(
        "Appends an entry to followUps, sets lastFollowUpDate to today and "
        "nextFollowUpDate to the supplied date (or clears it)."
    ),
)
async def add_follow_up(
    record_id: str,
    payload: FollowUpCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
):
    record = await adoption_record_service.add_follow_up(
        db, record_id, payload, operator=user.username
    )
    return ok(record)
