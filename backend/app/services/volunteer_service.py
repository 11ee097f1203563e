"""
Shelter Admin Backend — Volunteer Service
===========================================

What:  The volunteer roster and its participation counters.
Who:   routes/volunteers.py.

`log_hours` is the only writer of activities_participated and total_hours:
one UPDATE adds the hours and counts one more activity together.
"""

import logging

from sqlalchemy import String, cast, func
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.volunteer import Volunteer
from app.schemas.volunteer import (
    VolunteerCreate,
    VolunteerQuery,
    VolunteerResponse,
    VolunteerStats,
)
from app.services.base import CrudService, contains, count_where, equals, sum_of
from app.services.transitions import VOLUNTEER_STATUS

logger = logging.getLogger(__name__)


class VolunteerService(CrudService[Volunteer, VolunteerResponse]):
    model = Volunteer
    response_schema = VolunteerResponse
    resource = "Volunteer"
    order_column = "join_date"

    async def create(self, db: AsyncSession, payload: VolunteerCreate) -> VolunteerResponse:
        row = Volunteer(
            **payload.model_dump(),
            status=VOLUNTEER_STATUS.initial,
            activities_participated=0,
            total_hours=0,
        )
        return self.to_response(await self.insert(db, row))

    async def list(self, db: AsyncSession, query: VolunteerQuery):
        return await self.paginate(
            db,
            query,
            filters=[
                equals(Volunteer.status, query.status),
                contains(Volunteer.name, query.name),
                # skills is a JSON list; match against its serialized text
                contains(cast(Volunteer.skills, String), query.skills),
            ],
        )

    async def log_hours(self, db: AsyncSession, volunteer_id: int, hours: int) -> VolunteerResponse:
        row = await self.update_row(
            db,
            volunteer_id,
            {
                "total_hours": Volunteer.total_hours + hours,
                "activities_participated": Volunteer.activities_participated + 1,
            },
        )
        logger.info("Volunteer %d logged %d hours", volunteer_id, hours)
        return self.to_response(row)

    async def stats(self, db: AsyncSession) -> VolunteerStats:
        counts = await self.aggregate(
            db,
            total=func.count(),
            active=count_where(Volunteer.status == "active"),
            inactive=count_where(Volunteer.status == "inactive"),
            total_hours=sum_of(Volunteer.total_hours),
        )
        return VolunteerStats(**counts)


volunteer_service = VolunteerService()
