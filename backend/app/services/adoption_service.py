"""
Shelter Admin Backend — Adoption Application Service
======================================================

What:  Applications to adopt a pet, and the review workflow on them.
Who:   routes/adoptions.py.

Review workflow:
    ┌─────────┐  approve(approved)   ┌──────────┐
    │ pending │─────────────────────▶│ approved │
    │         │  approve(rejected)   ├──────────┤
    │         │─────────────────────▶│ rejected │
    │         │  cancel              ├──────────┤
    │         │─────────────────────▶│cancelled │
    └─────────┘                      └──────────┘

Every move out of pending is a conditional UPDATE whose WHERE clause lists
the states the target is reachable from. When two reviewers race, the
second UPDATE matches no row and gets InvalidStateError instead of
overwriting the first decision.
"""

import logging
from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import InvalidStateError
from app.models.adoption import Adoption
from app.models.mixins import utcnow
from app.schemas.adoption import (
    AdoptionCreate,
    AdoptionQuery,
    AdoptionResponse,
    AdoptionStats,
    AdoptionUpdate,
    ReviewDecision,
)
from app.services.base import CrudService, contains, count_where, equals
from app.services.transitions import ADOPTION_STATUS

logger = logging.getLogger(__name__)


class AdoptionService(CrudService[Adoption, AdoptionResponse]):
    model = Adoption
    response_schema = AdoptionResponse
    resource = "Adoption application"
    order_column = "application_date"

    async def create(self, db: AsyncSession, payload: AdoptionCreate) -> AdoptionResponse:
        row = Adoption(
            **payload.model_dump(),
            status=ADOPTION_STATUS.initial,
            application_date=utcnow(),
        )
        return self.to_response(await self.insert(db, row))

    async def list(self, db: AsyncSession, query: AdoptionQuery):
        return await self.paginate(
            db,
            query,
            filters=[
                equals(Adoption.status, query.status),
                contains(Adoption.applicant_name, query.applicant_name),
                contains(Adoption.pet_name, query.pet_name),
            ],
        )

    async def update(
        self, db: AsyncSession, adoption_id: int, payload: AdoptionUpdate
    ) -> AdoptionResponse:
        """Edits an application; only pending applications can be edited."""
        current = await self.get_row(db, adoption_id)
        if current.status != "pending":
            raise self._not_pending(current.status, "updated")
        row = await self.update_row(
            db,
            adoption_id,
            self.changes_from(payload),
            guards=[Adoption.status == "pending"],
            guard_message="Only pending applications can be updated",
        )
        return self.to_response(row)

    async def review(
        self,
        db: AsyncSession,
        adoption_id: int,
        decision: ReviewDecision,
        operator: str,
    ) -> AdoptionResponse:
        """
        Approves or rejects a pending application.

        Args:
            decision:  target status plus optional approver/rejecter names,
                       reason and remarks.
            operator:  username of the acting user; used when the decision
                       does not name an approver/rejecter.

        Raises:
            NotFoundError, InvalidStateError (not pending, or lost a race)
        """
        current = await self.get_row(db, adoption_id)
        target = decision.status
        ADOPTION_STATUS.ensure(
            current.status,
            target,
            message=f"Only pending applications can be reviewed (current status: {current.status})",
        )

        now = utcnow()
        if target == "approved":
            reviewer = decision.approver or operator
            changes = {
                "status": target,
                "approval_date": now,
                "approver": reviewer,
            }
            note = decision.remarks or "Approved"
        else:
            reviewer = decision.rejecter or operator
            changes = {
                "status": target,
                "rejection_date": now,
                "rejecter": reviewer,
                "reject_reason": decision.reject_reason,
            }
            note = decision.remarks or f"Rejected: {decision.reject_reason}"
        if decision.remarks is not None:
            changes["remarks"] = decision.remarks

        changes["review_notes"] = [
            *(current.review_notes or []),
            {"date": now.isoformat(), "content": note, "operator": reviewer},
        ]

        row = await self.update_row(
            db,
            adoption_id,
            changes,
            guards=[Adoption.status.in_(ADOPTION_STATUS.sources_for(target))],
            guard_message="The application was reviewed by someone else",
        )
        logger.info("Adoption %d %s by %s", adoption_id, target, reviewer)
        return self.to_response(row)

    async def cancel(self, db: AsyncSession, adoption_id: int) -> AdoptionResponse:
        current = await self.get_row(db, adoption_id)
        if not ADOPTION_STATUS.can(current.status, "cancelled"):
            raise self._not_pending(current.status, "cancelled")
        row = await self.update_row(
            db,
            adoption_id,
            {"status": "cancelled"},
            guards=[Adoption.status.in_(ADOPTION_STATUS.sources_for("cancelled"))],
            guard_message="Only pending applications can be cancelled",
        )
        logger.info("Adoption %d cancelled", adoption_id)
        return self.to_response(row)

    async def stats(self, db: AsyncSession) -> AdoptionStats:
        counts = await self.aggregate(
            db,
            total=func.count(),
            pending=count_where(Adoption.status == "pending"),
            approved=count_where(Adoption.status == "approved"),
            rejected=count_where(Adoption.status == "rejected"),
        )
        return AdoptionStats(**counts)

    @staticmethod
    def _not_pending(status: str, verb: str) -> InvalidStateError:
        return InvalidStateError(
            f"Only pending applications can be {verb} (current status: {status})",
            current=status,
        )


# ── Singleton ─────────────────────────────────────────────────────────────
adoption_service = AdoptionService()
