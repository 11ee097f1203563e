"""
Shelter Admin Backend — Dashboard Service
===========================================

What:  Read-only aggregates for the admin home page.
How:   Each section is a single SELECT. `get_dashboard` runs the sections
       one after another on the request's session; an AsyncSession is not
       safe for concurrent use.
Who:   routes/dashboard.py (public routes).

Sections:
    overview           totalPets, pendingAdoptions, adoptedPets, activeVolunteers
    adoption trend     latest 100 applications bucketed by YYYY-MM, last 6 months
    pet distribution   Dog / Cat / Other counts
    recent apps        newest N applications

The trend and distribution fall back to a fixed sample when their tables
are empty, so a fresh install still renders charts.
"""

import logging
from collections import Counter
from typing import List

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.adoption import Adoption
from app.models.pet import Pet
from app.models.volunteer import Volunteer
from app.schemas.dashboard import (
    Dashboard,
    DistributionSlice,
    Overview,
    RecentApplication,
    TrendPoint,
)

logger = logging.getLogger(__name__)

TREND_SAMPLE_SIZE = 100
TREND_MONTHS = 6
DEFAULT_RECENT_LIMIT = 5

SAMPLE_TREND = [
    ("2024-08", 12),
    ("2024-09", 19),
    ("2024-10", 15),
    ("2024-11", 25),
    ("2024-12", 22),
    ("2025-01", 18),
]
SAMPLE_DISTRIBUTION = [("Dog", 5), ("Cat", 3), ("Other", 2)]

# Pet types shown as their own slice; everything else is folded into "Other"
_NAMED_TYPES = {"dog": "Dog", "cat": "Cat"}


class DashboardService:
    async def overview(self, db: AsyncSession) -> Overview:
        def count_of(model, *conditions):
            return select(func.count()).select_from(model).where(*conditions).scalar_subquery()

        stmt = select(
            count_of(Pet).label("total_pets"),
            count_of(Adoption, Adoption.status == "pending").label("pending_adoptions"),
            count_of(Pet, Pet.adoption_status == "adopted").label("adopted_pets"),
            count_of(Volunteer, Volunteer.status == "active").label("active_volunteers"),
        )
        row = (await db.execute(stmt)).one()
        return Overview(**row._mapping)

    async def adoption_trend(self, db: AsyncSession) -> List[TrendPoint]:
        stmt = (
            select(Adoption.application_date)
            .order_by(Adoption.application_date.desc())
            .limit(TREND_SAMPLE_SIZE)
        )
        dates = (await db.execute(stmt)).scalars().all()
        if not dates:
            return [TrendPoint(name=month, apps=apps) for month, apps in SAMPLE_TREND]

        per_month = Counter(d.strftime("%Y-%m") for d in dates)
        months = sorted(per_month)[-TREND_MONTHS:]
        return [TrendPoint(name=month, apps=per_month[month]) for month in months]

    async def pet_distribution(self, db: AsyncSession) -> List[DistributionSlice]:
        stmt = select(Pet.type, func.count()).group_by(Pet.type)
        rows = (await db.execute(stmt)).all()
        if not rows:
            return [DistributionSlice(name=name, value=value) for name, value in SAMPLE_DISTRIBUTION]

        slices = Counter({"Dog": 0, "Cat": 0, "Other": 0})
        for pet_type, count in rows:
            slices[_NAMED_TYPES.get(pet_type, "Other")] += count
        return [DistributionSlice(name=name, value=slices[name]) for name in ("Dog", "Cat", "Other")]

    async def recent_applications(
        self, db: AsyncSession, limit: int = DEFAULT_RECENT_LIMIT
    ) -> List[RecentApplication]:
        stmt = select(Adoption).order_by(Adoption.application_date.desc()).limit(limit)
        rows = (await db.execute(stmt)).scalars().all()
        return [
            RecentApplication(
                application_id=row.id,
                pet_id=row.pet_id,
                applicant_name=row.applicant_name,
                pet_name=row.pet_name,
                status=row.status,
                application_date=row.application_date.strftime("%Y-%m-%d"),
            )
            for row in rows
        ]

    async def get_dashboard(self, db: AsyncSession) -> Dashboard:
        return Dashboard(
            overview=await self.overview(db),
            adoption_trend=await self.adoption_trend(db),
            pet_type_distribution=await self.pet_distribution(db),
            recent_applications=await self.recent_applications(db),
        )


dashboard_service = DashboardService()
