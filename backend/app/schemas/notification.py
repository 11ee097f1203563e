"""Shelter Admin Backend — Notification Schemas"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from app.schemas.common import CamelModel, ListQuery, RequestModel

NotificationType = Literal["adoption", "rescue", "donation", "activity", "system"]


class NotificationCreate(RequestModel):
    type: NotificationType
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)
    target_id: Optional[int] = None
    target_type: Optional[str] = Field(default=None, max_length=50)


class NotificationUpdate(RequestModel):
    type: Optional[NotificationType] = None
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    content: Optional[str] = Field(default=None, min_length=1)
    target_id: Optional[int] = None
    target_type: Optional[str] = Field(default=None, max_length=50)
    is_read: Optional[bool] = None


class NotificationQuery(ListQuery):
    type: Optional[NotificationType] = None
    unread_only: bool = False


class NotificationResponse(CamelModel):
    id: int
    type: str
    title: str
    content: str
    target_id: Optional[int] = None
    target_type: Optional[str] = None
    is_read: bool
    create_time: datetime
    update_time: datetime


class UnreadCount(CamelModel):
    unread_count: int


class NotificationStats(CamelModel):
    total: int
    unread: int
    read: int
