"""Shelter Admin Backend — Rescue Service"""

import logging

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.rescue import Rescue
from app.schemas.rescue import RescueCreate, RescueQuery, RescueResponse, RescueStats
from app.services.base import CrudService, contains, count_where, equals, sum_of

logger = logging.getLogger(__name__)


class RescueService(CrudService[Rescue, RescueResponse]):
    model = Rescue
    response_schema = RescueResponse
    resource = "Rescue"
    order_column = "rescue_date"

    async def create(self, db: AsyncSession, payload: RescueCreate) -> RescueResponse:
        return self.to_response(await self.insert(db, Rescue(**payload.model_dump())))

    async def list(self, db: AsyncSession, query: RescueQuery):
        return await self.paginate(
            db,
            query,
            filters=[
                contains(Rescue.rescuer, query.rescuer),
                contains(Rescue.rescue_location, query.rescue_location),
                equals(Rescue.rescue_type, query.rescue_type),
                equals(Rescue.health_condition, query.health_condition),
            ],
        )

    async def stats(self, db: AsyncSession) -> RescueStats:
        counts = await self.aggregate(
            db,
            total=func.count(),
            critical=count_where(Rescue.health_condition == "critical"),
            healthy=count_where(Rescue.health_condition == "healthy"),
            total_cost=sum_of(Rescue.cost),
        )
        counts["total_cost"] = float(counts["total_cost"] or 0)
        return RescueStats(**counts)


rescue_service = RescueService()
