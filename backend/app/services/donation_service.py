"""
Shelter Admin Backend — Donation Service
==========================================

What:  Money and in-kind donations, their confirmation and receipts.
Who:   routes/donations.py.

confirm / cancel / receipt apply regardless of the current status; a
confirmed donation can be cancelled and vice versa. receipt_issued only
ever moves to true.
"""

import logging
from typing import Any, Dict

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.donation import Donation
from app.models.mixins import utcnow
from app.schemas.donation import (
    DonationCreate,
    DonationQuery,
    DonationResponse,
    DonationStats,
    DonationUpdate,
)
from app.services.base import CrudService, contains, count_where, equals, sum_of
from app.services.transitions import DONATION_STATUS

logger = logging.getLogger(__name__)


class DonationService(CrudService[Donation, DonationResponse]):
    model = Donation
    response_schema = DonationResponse
    resource = "Donation"
    order_column = "donation_date"

    @staticmethod
    def _serialize_items(values: Dict[str, Any], payload) -> Dict[str, Any]:
        # Line items are stored with their API (camelCase) keys
        if payload.items is not None:
            values["items"] = [
                item.model_dump(by_alias=True, exclude_none=True) for item in payload.items
            ]
        return values

    async def create(self, db: AsyncSession, payload: DonationCreate) -> DonationResponse:
        values = self._serialize_items(payload.model_dump(), payload)
        values["donation_date"] = values["donation_date"] or utcnow()
        row = Donation(**values, status=DONATION_STATUS.initial, receipt_issued=False)
        return self.to_response(await self.insert(db, row))

    async def list(self, db: AsyncSession, query: DonationQuery):
        return await self.paginate(
            db,
            query,
            filters=[
                equals(Donation.status, query.status),
                equals(Donation.donation_type, query.donation_type),
                equals(Donation.donor_type, query.donor_type),
                contains(Donation.donor_name, query.donor_name),
            ],
        )

    async def update(
        self, db: AsyncSession, donation_id: int, payload: DonationUpdate
    ) -> DonationResponse:
        changes = self._serialize_items(self.changes_from(payload), payload)
        return self.to_response(await self.update_row(db, donation_id, changes))

    async def set_status(self, db: AsyncSession, donation_id: int, target: str) -> DonationResponse:
        current = await self.get_row(db, donation_id)
        DONATION_STATUS.ensure(current.status, target)
        row = await self.update_row(db, donation_id, {"status": target})
        logger.info("Donation %d %s", donation_id, target)
        return self.to_response(row)

    async def confirm(self, db: AsyncSession, donation_id: int) -> DonationResponse:
        return await self.set_status(db, donation_id, "confirmed")

    async def cancel(self, db: AsyncSession, donation_id: int) -> DonationResponse:
        return await self.set_status(db, donation_id, "cancelled")

    async def issue_receipt(self, db: AsyncSession, donation_id: int) -> DonationResponse:
        row = await self.update_row(db, donation_id, {"receipt_issued": True})
        logger.info("Receipt issued for donation %d", donation_id)
        return self.to_response(row)

    async def stats(self, db: AsyncSession) -> DonationStats:
        confirmed = Donation.status == "confirmed"
        counts = await self.aggregate(
            db,
            total=func.count(),
            pending=count_where(Donation.status == "pending"),
            confirmed=count_where(confirmed),
            total_amount=sum_of(Donation.amount, confirmed),
        )
        counts["total_amount"] = float(counts["total_amount"] or 0)
        return DonationStats(**counts)


donation_service = DonationService()
