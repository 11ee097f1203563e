"""
Shelter Admin Backend — Activity Service
==========================================

What:  Shelter events and sign-ups.
Who:   routes/activities.py.

Participant counting:
    join   UPDATE ... SET participant_count = participant_count + 1
           WHERE id = :id AND (participant_limit IS NULL
                               OR participant_count < participant_limit)
    leave  UPDATE ... SET participant_count = participant_count - 1
           WHERE id = :id AND participant_count > 0

The limit check and the increment are one statement, so simultaneous joins
cannot push the count past the limit. A leave at zero is a quiet no-op.
"""

import logging

from sqlalchemy import func, or_, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import InvalidStateError
from app.models.activity import Activity
from app.models.mixins import utcnow
from app.schemas.activity import ActivityCreate, ActivityQuery, ActivityResponse, ActivityStats
from app.services.base import CrudService, contains, count_where, equals
from app.services.transitions import ACTIVITY_STATUS

logger = logging.getLogger(__name__)


class ActivityService(CrudService[Activity, ActivityResponse]):
    model = Activity
    response_schema = ActivityResponse
    resource = "Activity"
    order_column = "start_date"

    async def create(self, db: AsyncSession, payload: ActivityCreate) -> ActivityResponse:
        row = Activity(
            **payload.model_dump(),
            status=ACTIVITY_STATUS.initial,
            participant_count=0,
        )
        return self.to_response(await self.insert(db, row))

    async def list(self, db: AsyncSession, query: ActivityQuery):
        return await self.paginate(
            db,
            query,
            filters=[
                equals(Activity.type, query.type),
                equals(Activity.status, query.status),
                contains(Activity.title, query.title),
                contains(Activity.location, query.location),
            ],
        )

    async def join(self, db: AsyncSession, activity_id: int) -> ActivityResponse:
        """
        Adds one participant.

        Raises:
            NotFoundError: unknown activity.
            InvalidStateError: the activity is already at its participant limit.
        """
        stmt = (
            update(Activity)
            .where(
                Activity.id == activity_id,
                or_(
                    Activity.participant_limit.is_(None),
                    Activity.participant_count < Activity.participant_limit,
                ),
            )
            .values(participant_count=Activity.participant_count + 1, update_time=utcnow())
            .execution_options(synchronize_session=False)
        )
        result = await db.execute(stmt)
        if result.rowcount == 0:
            current = await self.get_row(db, activity_id, populate_existing=True)
            raise InvalidStateError(
                f"Activity is full ({current.participant_count}/{current.participant_limit})",
                context={"activity_id": activity_id},
            )
        row = await self.get_row(db, activity_id, populate_existing=True)
        logger.info(
            "Activity %d joined (%d/%s)",
            activity_id,
            row.participant_count,
            row.participant_limit if row.participant_limit is not None else "unlimited",
        )
        return self.to_response(row)

    async def leave(self, db: AsyncSession, activity_id: int) -> ActivityResponse:
        """Removes one participant; already at zero means nothing changes."""
        stmt = (
            update(Activity)
            .where(Activity.id == activity_id, Activity.participant_count > 0)
            .values(participant_count=Activity.participant_count - 1, update_time=utcnow())
            .execution_options(synchronize_session=False)
        )
        await db.execute(stmt)
        return self.to_response(await self.get_row(db, activity_id, populate_existing=True))

    async def stats(self, db: AsyncSession) -> ActivityStats:
        counts = await self.aggregate(
            db,
            total=func.count(),
            upcoming=count_where(Activity.status == "upcoming"),
            ongoing=count_where(Activity.status == "ongoing"),
            completed=count_where(Activity.status == "completed"),
        )
        return ActivityStats(**counts)


# ── Singleton ─────────────────────────────────────────────────────────────
activity_service = ActivityService()
