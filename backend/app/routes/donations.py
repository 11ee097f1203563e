"""
Shelter Admin Backend — Donation Route Handlers
=================================================

What:  /donations CRUD plus confirm, cancel and receipt actions.

The three actions apply whatever the donation's current status is.
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
from app.schemas.donation import (
    DonationCreate,
    DonationQuery,
    DonationResponse,
    DonationStats,
    DonationStatus,
    DonationType,
    DonationUpdate,
    DonorType,
)
from app.services.donation_service import donation_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/donations",
    tags=["Donations"],
    dependencies=[Depends(get_current_user)],
    responses={
        400: {"description": "Invalid input", "model": ErrorResponse},
        401: {"description": "Not signed in", "model": ErrorResponse},
    },
)

_NOT_FOUND = {404: {"description": "Donation not found", "model": ErrorResponse}}


def donation_query(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    status: Optional[DonationStatus] = Query(default=None),
    donor_name: Optional[str] = Query(default=None, alias="donorName", description="Substring match"),
    donation_type: Optional[DonationType] = Query(default=None, alias="donationType"),
    donor_type: Optional[DonorType] = Query(default=None, alias="donorType"),
) -> DonationQuery:
    return parse_query(
        DonationQuery,
        page=page,
        limit=limit,
        status=status,
        donor_name=donor_name,
        donation_type=donation_type,
        donor_type=donor_type,
    )


@router.post(
    "",
    status_code=201,
    response_model=ApiResponse[DonationResponse],
    summary="Record a donation",
    description="Starts pending. donationDate defaults to now.",
)
async def create_donation(payload: DonationCreate, db: AsyncSession = Depends(get_db_session)):
    return ok(await donation_service.create(db, payload), code=201)


@router.get(
    "",
    response_model=ApiResponse[Page[DonationResponse]],
    summary="List donations",
    description="Newest donationDate first.",
)
async def list_donations(
    query: DonationQuery = Depends(donation_query),
    db: AsyncSession = Depends(get_db_session),
):
    return ok(await donation_service.list(db, query))


@router.get(
    "/stats",
    response_model=ApiResponse[DonationStats],
    summary="Donation counts and confirmed total",
)
async def donation_stats(db: AsyncSession = Depends(get_db_session)):
    return ok(await donation_service.stats(db))


@router.get(
    "/{donation_id}",
    response_model=ApiResponse[DonationResponse],
    responses=_NOT_FOUND,
    summary="Get a donation",
)
async def get_donation(donation_id: int = Path(ge=1), db: AsyncSession = Depends(get_db_session)):
    return ok(await donation_service.get(db, donation_id))


@router.patch(
    "/{donation_id}",
    response_model=ApiResponse[DonationResponse],
    responses=_NOT_FOUND,
    summary="Update a donation",
)
async def update_donation(
    payload: DonationUpdate,
    donation_id: int = Path(ge=1),
    db: AsyncSession = Depends(get_db_session),
):
    return ok(await donation_service.update(db, donation_id, payload))


@router.delete(
    "/{donation_id}",
    response_model=ApiResponse[MessageResponse],
    responses=_NOT_FOUND,
    summary="Delete a donation",
)
async def delete_donation(donation_id: int = Path(ge=1), db: AsyncSession = Depends(get_db_session)):
    return ok(await donation_service.delete(db, donation_id))


@router.post(
    "/{donation_id}/confirm",
    response_model=ApiResponse[DonationResponse],
    responses=_NOT_FOUND,
    summary="Mark a donation confirmed",
)
async def confirm_donation(donation_id: int = Path(ge=1), db: AsyncSession = Depends(get_db_session)):
    return ok(await donation_service.confirm(db, donation_id))


@router.post(
    "/{donation_id}/cancel",
    response_model=ApiResponse[DonationResponse],
    responses=_NOT_FOUND,
    summary="Mark a donation cancelled",
)
async def cancel_donation(donation_id: int = Path(ge=1), db: AsyncSession = Depends(get_db_session)):
    return ok(await donation_service.cancel(db, donation_id))


@router.post(
    "/{donation_id}/receipt",
    response_model=ApiResponse[DonationResponse],
    responses=_NOT_FOUND,
    summary="Record that a receipt was issued",
)
async def issue_receipt(donation_id: int = Path(ge=1), db: AsyncSession = Depends(get_db_session)):
    return ok(await donation_service.issue_receipt(db, donation_id))
