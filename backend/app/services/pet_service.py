"""
Shelter Admin Backend — Pet Service
=====================================

What:  Pet inventory CRUD, the view/favorite counters, and pet stats.
Who:   routes/pets.py.

Counter semantics:
    view_count      +1 on every successful detail fetch, before the row is read
    favorite_count  +1 always; -1 only while > 0 (a no-op at zero, not an error)

Both counters change through `UPDATE ... SET col = col ± 1`, so concurrent
fetches and favorites are never lost.
"""

import logging

from sqlalchemy import func, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import NotFoundError
from app.models.pet import Pet
from app.schemas.pet import PetCreate, PetQuery, PetResponse, PetStats
from app.services.base import CrudService, contains, count_where, equals

logger = logging.getLogger(__name__)


class PetService(CrudService[Pet, PetResponse]):
    model = Pet
    response_schema = PetResponse
    resource = "Pet"
    order_column = "create_time"

    async def create(self, db: AsyncSession, payload: PetCreate) -> PetResponse:
        row = Pet(**payload.model_dump(), view_count=0, favorite_count=0)
        return self.to_response(await self.insert(db, row))

    async def list(self, db: AsyncSession, query: PetQuery):
        return await self.paginate(
            db,
            query,
            filters=[
                equals(Pet.type, query.type),
                equals(Pet.gender, query.gender),
                equals(Pet.health_status, query.health_status),
                equals(Pet.adoption_status, query.adoption_status),
                contains(Pet.location, query.location),
            ],
        )

    async def view(self, db: AsyncSession, pet_id: int) -> PetResponse:
        """Detail fetch: increments view_count by exactly one, then returns the pet."""
        await self._increment(db, pet_id, Pet.view_count)
        row = await self.get_row(db, pet_id, populate_existing=True)
        return self.to_response(row)

    async def add_favorite(self, db: AsyncSession, pet_id: int) -> PetResponse:
        await self._increment(db, pet_id, Pet.favorite_count)
        return self.to_response(await self.get_row(db, pet_id, populate_existing=True))

    async def remove_favorite(self, db: AsyncSession, pet_id: int) -> PetResponse:
        stmt = (
            update(Pet)
            .where(Pet.id == pet_id, Pet.favorite_count > 0)
            .values(favorite_count=Pet.favorite_count - 1)
            .execution_options(synchronize_session=False)
        )
        await db.execute(stmt)
        # Zero rows is fine here: either the pet is missing (404 below) or the
        # count is already zero
        return self.to_response(await self.get_row(db, pet_id, populate_existing=True))

    async def stats(self, db: AsyncSession) -> PetStats:
        counts = await self.aggregate(
            db,
            total=func.count(),
            available=count_where(Pet.adoption_status == "available"),
            adopted=count_where(Pet.adoption_status == "adopted"),
            treating=count_where(Pet.health_status == "treating"),
        )
        return PetStats(**counts)

    async def _increment(self, db: AsyncSession, pet_id: int, column) -> None:
        stmt = (
            update(Pet)
            .where(Pet.id == pet_id)
            .values({column: column + 1})
            .execution_options(synchronize_session=False)
        )
        result = await db.execute(stmt)
        if result.rowcount == 0:
            raise NotFoundError(resource=self.resource, resource_id=pet_id)


# ── Singleton ─────────────────────────────────────────────────────────────
pet_service = PetService()
