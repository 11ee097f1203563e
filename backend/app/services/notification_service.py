"""Shelter Admin Backend — Notification Service"""

import logging

from sqlalchemy import func, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.mixins import utcnow
from app.models.notification import Notification
from app.schemas.common import MessageResponse
from app.schemas.notification import (
    NotificationCreate,
    NotificationQuery,
    NotificationResponse,
    NotificationStats,
    UnreadCount,
)
from app.services.base import CrudService, count_where, equals

logger = logging.getLogger(__name__)


class NotificationService(CrudService[Notification, NotificationResponse]):
    model = Notification
    response_schema = NotificationResponse
    resource = "Notification"
    order_column = "create_time"

    async def create(self, db: AsyncSession, payload: NotificationCreate) -> NotificationResponse:
        row = Notification(**payload.model_dump(), is_read=False)
        return self.to_response(await self.insert(db, row))

    async def list(self, db: AsyncSession, query: NotificationQuery):
        return await self.paginate(
            db,
            query,
            filters=[
                equals(Notification.type, query.type),
                Notification.is_read.is_(False) if query.unread_only else None,
            ],
        )

    async def mark_read(self, db: AsyncSession, notification_id: int) -> NotificationResponse:
        return self.to_response(await self.update_row(db, notification_id, {"is_read": True}))

    async def mark_all_read(self, db: AsyncSession) -> MessageResponse:
        stmt = (
            update(Notification)
            .where(Notification.is_read.is_(False))
            .values(is_read=True, update_time=utcnow())
            .execution_options(synchronize_session=False)
        )
        result = await db.execute(stmt)
        logger.info("Marked %d notifications as read", result.rowcount)
        return MessageResponse(message="All notifications marked as read", count=result.rowcount)

    async def unread_count(self, db: AsyncSession) -> UnreadCount:
        counts = await self.aggregate(db, unread_count=count_where(Notification.is_read.is_(False)))
        return UnreadCount(**counts)

    async def stats(self, db: AsyncSession) -> NotificationStats:
        counts = await self.aggregate(
            db,
            total=func.count(),
            unread=count_where(Notification.is_read.is_(False)),
            read=count_where(Notification.is_read.is_(True)),
        )
        return NotificationStats(**counts)


notification_service = NotificationService()
