"""
Shelter Admin Backend — Shared Data-Access Plumbing
=====================================================

What:  The list/get/update/delete/stats mechanics every resource service
       repeats, written once.
How:   A resource service subclasses `CrudService`, names its model,
       response schema and ordering column, and builds its own filters
       with the `equals` / `contains` helpers.

Query shapes:
    list     SELECT count(*) ... WHERE <filters>
             SELECT ... WHERE <filters> ORDER BY <order> DESC LIMIT :l OFFSET :o
    update   UPDATE <table> SET <supplied columns>, update_time = now
             WHERE id = :id [AND <guards>]
    stats    SELECT count(CASE WHEN ... THEN 1 END) AS a, ... FROM <table>

Partial updates never read-merge-save the whole row: only the columns the
caller sent are written, so two editors touching different fields do not
overwrite each other.
"""

import logging
from typing import Any, ClassVar, Dict, Generic, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import ColumnElement, case, delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base
from app.exceptions import InvalidStateError, NotFoundError
from app.models.mixins import utcnow
from app.schemas.common import ListQuery, MessageResponse, Page

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


# ══════════════════════════════════════════════════════════════════════════
# Filter and aggregate helpers
# ══════════════════════════════════════════════════════════════════════════


def equals(column, value: Any) -> Optional[ColumnElement[bool]]:
    """`column = value`, or None when the filter was not supplied."""
    if value is None:
        return None
    return column == value


def contains(column, value: Optional[str]) -> Optional[ColumnElement[bool]]:
    """`column LIKE '%value%'` with % and _ in the value matched literally."""
    if value is None or value == "":
        return None
    return column.contains(value, autoescape=True)


def count_where(condition: ColumnElement[bool]):
    """COUNT of rows matching `condition`, evaluated inside one aggregate SELECT."""
    return func.count(case((condition, 1)))


def sum_of(column, condition: Optional[ColumnElement[bool]] = None):
    """SUM of `column` (optionally only where `condition`), 0 when nothing matches."""
    expr = column if condition is None else case((condition, column))
    return func.coalesce(func.sum(expr), 0)


# ══════════════════════════════════════════════════════════════════════════
# Generic service
# ══════════════════════════════════════════════════════════════════════════


class CrudService(Generic[ModelT, ResponseT]):
    """
    Base class for resource services.

    Subclasses set:
        model:            ORM class
        response_schema:  pydantic model rows are validated into
        resource:         label used in 404 messages ("Pet")
        order_column:     attribute name listings sort on, descending
    """

    model: ClassVar[Type[Base]]
    response_schema: ClassVar[Type[BaseModel]]
    resource: ClassVar[str]
    order_column: ClassVar[str] = "create_time"

    # ── Reads ─────────────────────────────────────────────────────────────

    def to_response(self, row: ModelT) -> ResponseT:
        return self.response_schema.model_validate(row)

    async def get_row(self, db: AsyncSession, item_id: Any, **kwargs: Any) -> ModelT:
        """Loads one row or raises NotFoundError. kwargs go to `AsyncSession.get`."""
        row = await db.get(self.model, item_id, **kwargs)
        if row is None:
            raise NotFoundError(resource=self.resource, resource_id=item_id)
        return row

    async def get(self, db: AsyncSession, item_id: Any) -> ResponseT:
        return self.to_response(await self.get_row(db, item_id))

    async def paginate(
        self,
        db: AsyncSession,
        query: ListQuery,
        filters: Sequence[Optional[ColumnElement[bool]]] = (),
    ) -> Page[ResponseT]:
        """
        One page of rows matching every supplied filter (AND), newest first.

        `None` entries in `filters` stand for parameters the caller left out.
        """
        conditions = [f for f in filters if f is not None]

        count_stmt = select(func.count()).select_from(self.model).where(*conditions)
        total = (await db.execute(count_stmt)).scalar_one()

        order = getattr(self.model, self.order_column)
        stmt = (
            select(self.model)
            .where(*conditions)
            .order_by(order.desc(), self.model.id.desc())
            .offset(query.offset)
            .limit(query.limit)
        )
        rows = (await db.execute(stmt)).scalars().all()

        return Page[self.response_schema].build(
            items=[self.to_response(row) for row in rows],
            total=total,
            page=query.page,
            limit=query.limit,
        )

    async def aggregate(self, db: AsyncSession, **expressions: Any) -> Dict[str, Any]:
        """
        Evaluates every named aggregate in a single SELECT over the table.

        Example:
            await self.aggregate(db, total=func.count(), open=count_where(M.status == "open"))
        """
        stmt = select(*(expr.label(name) for name, expr in expressions.items())).select_from(
            self.model
        )
        row = (await db.execute(stmt)).one()
        return dict(row._mapping)

    # ── Writes ────────────────────────────────────────────────────────────

    async def insert(self, db: AsyncSession, row: ModelT) -> ModelT:
        db.add(row)
        await db.flush()
        await db.refresh(row)
        logger.info("%s created: %s", self.resource, row.id)
        return row

    def changes_from(self, payload: BaseModel) -> Dict[str, Any]:
        """
        The fields the caller actually sent.

        An explicit null for a NOT NULL column is dropped rather than written.
        """
        table = self.model.__table__
        return {
            key: value
            for key, value in payload.model_dump(exclude_unset=True).items()
            if value is not None or (key in table.c and table.c[key].nullable)
        }

    async def update_row(
        self,
        db: AsyncSession,
        item_id: Any,
        changes: Dict[str, Any],
        guards: Sequence[ColumnElement[bool]] = (),
        guard_message: str = "The record changed state and can no longer be updated",
    ) -> ModelT:
        """
        Writes `changes` plus update_time in one UPDATE and returns the fresh row.

        Args:
            guards:         extra WHERE conditions (status preconditions). When
                            the row exists but a guard fails, InvalidStateError
                            is raised with `guard_message`.

        Raises:
            NotFoundError, InvalidStateError
        """
        stmt = (
            update(self.model)
            .where(self.model.id == item_id, *guards)
            .values(**changes, update_time=utcnow())
            .execution_options(synchronize_session=False)
        )
        result = await db.execute(stmt)
        if result.rowcount == 0:
            # Distinguish a missing row from a failed guard
            await self.get_row(db, item_id)
            raise InvalidStateError(guard_message)
        return await self.get_row(db, item_id, populate_existing=True)

    async def update(self, db: AsyncSession, item_id: Any, payload: BaseModel) -> ResponseT:
        row = await self.update_row(db, item_id, self.changes_from(payload))
        return self.to_response(row)

    async def delete(self, db: AsyncSession, item_id: Any) -> MessageResponse:
        result = await db.execute(delete(self.model).where(self.model.id == item_id))
        if result.rowcount == 0:
            raise NotFoundError(resource=self.resource, resource_id=item_id)
        logger.info("%s deleted: %s", self.resource, item_id)
        return MessageResponse(message=f"{self.resource} deleted successfully", id=item_id)
