"""
Shelter Admin Backend — Adoption Record Service
=================================================

What:  Finalized adoptions and their post-adoption follow-up log.
Who:   routes/adoption_records.py.

Record numbers:
    AR-<year>-<6 random digits>, e.g. AR-2025-004217. The unique constraint
    on record_number is the source of truth: each attempt inserts inside a
    SAVEPOINT, and a uniqueness violation rolls back only that savepoint and
    draws a new number. Tenacity drives the attempts; running out of them
    surfaces as DatabaseError.

Follow-ups:
    Entries are only ever appended. The row is read with SELECT ... FOR UPDATE
    (a no-op on SQLite) so two concurrent appends serialize instead of one
    replacing the other's list.
"""

import logging
import secrets
import uuid
from datetime import date
from typing import Any, Dict, Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from tenacity import (
    RetryError,
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
)

from app.config import settings
from app.exceptions import DatabaseError
from app.models.adoption_record import RECORD_NUMBER_PREFIX, AdoptionRecord
from app.models.mixins import utcnow
from app.schemas.adoption_record import (
    AdoptionRecordCreate,
    AdoptionRecordQuery,
    AdoptionRecordResponse,
    AdoptionRecordStats,
    AdoptionRecordUpdate,
    FollowUpCreate,
)
from app.services.base import CrudService, contains, count_where, equals
from app.services.transitions import ADOPTION_RECORD_STATUS

logger = logging.getLogger(__name__)


class RecordNumberTaken(Exception):
    """Internal signal: the drawn record number already exists."""

    def __init__(self, record_number: str):
        self.record_number = record_number
        super().__init__(record_number)


def generate_record_number(year: Optional[int] = None) -> str:
    """AR-YYYY-NNNNNN with a zero-padded random six-digit suffix."""
    year = year or utcnow().year
    return f"{RECORD_NUMBER_PREFIX}-{year:04d}-{secrets.randbelow(1_000_000):06d}"


class AdoptionRecordService(CrudService[AdoptionRecord, AdoptionRecordResponse]):
    model = AdoptionRecord
    response_schema = AdoptionRecordResponse
    resource = "Adoption record"
    order_column = "adoption_date"

    async def create(
        self, db: AsyncSession, payload: AdoptionRecordCreate, operator: str
    ) -> AdoptionRecordResponse:
        """
        Creates an active record with an empty follow-up log.

        Raises:
            DatabaseError: no free record number within the configured attempts.
        """
        values = {
            **payload.model_dump(),
            "status": ADOPTION_RECORD_STATUS.initial,
            "follow_ups": [],
            "created_by": operator,
            "updated_by": operator,
        }
        try:
            row = await self._insert_with_record_number(db, values)
        except RetryError as e:
            logger.error(
                "Could not allocate a record number after %d attempts (last: %s)",
                settings.record_number_max_attempts,
                e.last_attempt.exception() if e.last_attempt else "unknown",
            )
            raise DatabaseError(
                message="Could not allocate a unique record number. Please try again.",
                context={"attempts": settings.record_number_max_attempts},
            )
        await db.refresh(row)
        logger.info("Adoption record %s created as %s", row.id, row.record_number)
        return self.to_response(row)

    @retry(
        retry=retry_if_exception_type(RecordNumberTaken),
        stop=stop_after_attempt(settings.record_number_max_attempts),
        before_sleep=before_sleep_log(logger, logging.WARNING),
    )
    async def _insert_with_record_number(
        self, db: AsyncSession, values: Dict[str, Any]
    ) -> AdoptionRecord:
        row = AdoptionRecord(**values, record_number=generate_record_number())
        try:
            async with db.begin_nested():
                db.add(row)
                await db.flush()
        except IntegrityError as exc:
            raise RecordNumberTaken(row.record_number) from exc
        return row

    async def list(self, db: AsyncSession, query: AdoptionRecordQuery):
        return await self.paginate(
            db,
            query,
            filters=[
                equals(AdoptionRecord.status, query.status),
                equals(AdoptionRecord.record_number, query.record_number),
                contains(AdoptionRecord.pet_name, query.pet_name),
                contains(AdoptionRecord.adopter_name, query.adopter_name),
                AdoptionRecord.adoption_date >= query.start_date if query.start_date else None,
                AdoptionRecord.adoption_date <= query.end_date if query.end_date else None,
            ],
        )

    async def update(
        self,
        db: AsyncSession,
        record_id: str,
        payload: AdoptionRecordUpdate,
        operator: str,
    ) -> AdoptionRecordResponse:
        changes = self.changes_from(payload)
        changes["updated_by"] = operator
        return self.to_response(await self.update_row(db, record_id, changes))

    async def add_follow_up(
        self,
        db: AsyncSession,
        record_id: str,
        payload: FollowUpCreate,
        operator: str,
    ) -> AdoptionRecordResponse:
        """
        Appends one follow-up entry.

        last_follow_up_date becomes today; next_follow_up_date takes the
        supplied value, or is cleared when none is given.
        """
        current = await self.get_row(db, record_id, with_for_update=True, populate_existing=True)

        now = utcnow()
        author = payload.operator or operator
        entry = {
            "id": str(uuid.uuid4()),
            "date": now.isoformat(),
            "content": payload.content,
            "operator": author,
            "nextFollowUpDate": (
                payload.next_follow_up_date.isoformat() if payload.next_follow_up_date else None
            ),
        }
        changes = {
            "follow_ups": [*(current.follow_ups or []), entry],
            "last_follow_up_date": now.date(),
            "next_follow_up_date": payload.next_follow_up_date,
            "updated_by": author,
        }
        row = await self.update_row(db, record_id, changes)
        logger.info("Follow-up added to adoption record %s by %s", record_id, author)
        return self.to_response(row)

    async def stats(self, db: AsyncSession, today: Optional[date] = None) -> AdoptionRecordStats:
        today = today or utcnow().date()
        counts = await self.aggregate(
            db,
            total=func.count(),
            active=count_where(AdoptionRecord.status == "active"),
            completed=count_where(AdoptionRecord.status == "completed"),
            cancelled=count_where(AdoptionRecord.status == "cancelled"),
            pending_follow_up=count_where(
                (AdoptionRecord.status == "active")
                & (AdoptionRecord.next_follow_up_date < today)
            ),
        )
        return AdoptionRecordStats(**counts)


# ── Singleton ─────────────────────────────────────────────────────────────
adoption_record_service = AdoptionRecordService()
