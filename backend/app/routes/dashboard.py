"""
Shelter Admin Backend — Dashboard Route Handlers
==================================================

What:  Read-only aggregates for the admin home page. Public: no token needed.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.routes import ok
from app.schemas.common import ApiResponse
from app.schemas.dashboard import (
    Dashboard,
    DistributionSlice,
    Overview,
    RecentApplication,
    TrendPoint,
)
from app.services.dashboard_service import DEFAULT_RECENT_LIMIT, dashboard_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get(
    "",
    response_model=ApiResponse[Dashboard],
    summary="Everything the home page shows",
    description="overview, adoptionTrend, petTypeDistribution and recentApplications in one call.",
)
async def get_dashboard(db: AsyncSession = Depends(get_db_session)):
    return ok(await dashboard_service.get_dashboard(db))


@router.get("/overview", response_model=ApiResponse[Overview], summary="Headline counts")
async def get_overview(db: AsyncSession = Depends(get_db_session)):
    return ok(await dashboard_service.overview(db))


@router.get(
    "/adoption-trend",
    response_model=ApiResponse[List[TrendPoint]],
    summary="Applications per month",
    description="Latest 100 applications grouped by YYYY-MM, oldest month first, at most 6 months.",
)
async def get_adoption_trend(db: AsyncSession = Depends(get_db_session)):
    return ok(await dashboard_service.adoption_trend(db))


@router.get(
    "/pet-distribution",
    response_model=ApiResponse[List[DistributionSlice]],
    summary="Pets by type",
    description="Dog, Cat, and Other (all remaining types).",
)
async def get_pet_distribution(db: AsyncSession = Depends(get_db_session)):
    return ok(await dashboard_service.pet_distribution(db))


@router.get(
    "/recent-applications",
    response_model=ApiResponse[List[RecentApplication]],
    summary="Newest adoption applications",
)
async def get_recent_applications(
    limit: int = Query(default=DEFAULT_RECENT_LIMIT, ge=1, le=50),
    db: AsyncSession = Depends(get_db_session),
):
    return ok(await dashboard_service.recent_applications(db, limit))
