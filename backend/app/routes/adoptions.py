"""
Shelter Admin Backend — Adoption Application Route Handlers
=============================================================

What:  /adoptions CRUD plus the review (approve/reject) and cancel actions.
Who:   Admin console application queue.

Approve and cancel only succeed on pending applications; anything else
answers 400 with the current status in the message.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.dependencies import get_current_user, parse_query
from app.models.user import User
from app.routes import ok
from app.schemas.adoption import (
    AdoptionCreate,
    AdoptionQuery,
    AdoptionResponse,
    AdoptionStats,
    AdoptionStatus,
    AdoptionUpdate,
    ReviewDecision,
)
from app.schemas.common import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    ApiResponse,
    ErrorResponse,
    MessageResponse,
    Page,
)
from app.services.adoption_service import adoption_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/adoptions",
    tags=["Adoptions"],
    dependencies=[Depends(get_current_user)],
    responses={
        400: {"description": "Invalid input or not pending", "model": ErrorResponse},
        401: {"description": "Not signed in", "model": ErrorResponse},
    },
)

_NOT_FOUND = {404: {"description": "Application not found", "model": ErrorResponse}}


def adoption_query(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    status: Optional[AdoptionStatus] = Query(default=None),
    applicant_name: Optional[str] = Query(default=None, alias="applicantName"),
    pet_name: Optional[str] = Query(default=None, alias="petName"),
) -> AdoptionQuery:
    return parse_query(
        AdoptionQuery,
        page=page,
        limit=limit,
        status=status,
        applicant_name=applicant_name,
        pet_name=pet_name,
    )


@router.post(
    "",
    status_code=201,
    response_model=ApiResponse[AdoptionResponse],
    summary="Submit an adoption application",
    description="New applications start as pending with applicationDate set to now.",
)
async def create_adoption(
    payload: AdoptionCreate,
    db: AsyncSession = Depends(get_db_session),
):
    return ok(await adoption_service.create(db, payload), code=201)


@router.get(
    "",
    response_model=ApiResponse[Page[AdoptionResponse]],
    summary="List adoption applications",
    description="Newest applicationDate first.",
)
async def list_adoptions(
    query: AdoptionQuery = Depends(adoption_query),
    db: AsyncSession = Depends(get_db_session),
):
    return ok(await adoption_service.list(db, query))


@router.get("/stats", response_model=ApiResponse[AdoptionStats], summary="Application counts")
async def adoption_stats(db: AsyncSession = Depends(get_db_session)):
    return ok(await adoption_service.stats(db))


@router.get(
    "/{adoption_id}",
    response_model=ApiResponse[AdoptionResponse],
    responses=_NOT_FOUND,
    summary="Get an adoption application",
)
async def get_adoption(
    adoption_id: int = Path(ge=1),
    db: AsyncSession = Depends(get_db_session),
):
    return ok(await adoption_service.get(db, adoption_id))


@router.patch(
    "/{adoption_id}",
    response_model=ApiResponse[AdoptionResponse],
    responses=_NOT_FOUND,
    summary="Edit a pending application",
)
async def update_adoption(
    payload: AdoptionUpdate,
    adoption_id: int = Path(ge=1),
    db: AsyncSession = Depends(get_db_session),
):
    return ok(await adoption_service.update(db, adoption_id, payload))


@router.delete(
    "/{adoption_id}",
    response_model=ApiResponse[MessageResponse],
    responses=_NOT_FOUND,
    summary="Delete an adoption application",
)
async def delete_adoption(
    adoption_id: int = Path(ge=1),
    db: AsyncSession = Depends(get_db_session),
):
    return ok(await adoption_service.delete(db, adoption_id))


@router.post(
    "/{adoption_id}/approve",
    response_model=ApiResponse[AdoptionResponse],
    responses=_NOT_FOUND,
    summary="Approve or reject an application",
    description=(
        "Body status 'approved' records approvalDate and approver; 'rejected' requires "
        "rejectReason and records rejectionDate and rejecter. The reviewer defaults to "
        "the signed-in user."
    ),
)
async def review_adoption(
    decision: ReviewDecision,
    adoption_id: int = Path(ge=1),
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
):
    return ok(await adoption_service.review(db, adoption_id, decision, operator=user.username))


@router.post(
    "/{adoption_id}/cancel",
    response_model=ApiResponse[AdoptionResponse],
    responses=_NOT_FOUND,
    summary="Cancel a pending application",
)
async def cancel_adoption(
    adoption_id: int = Path(ge=1),
    db: AsyncSession = Depends(get_db_session),
):
    return ok(await adoption_service.cancel(db, adoption_id))
