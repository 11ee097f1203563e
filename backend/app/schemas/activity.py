"""Shelter Admin Backend — Activity Schemas"""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field

from app.schemas.common import CamelModel, ListQuery, RequestModel

ActivityType = Literal["adoption", "volunteer", "training", "fundraising", "education"]
ActivityStatus = Literal["upcoming", "ongoing", "completed", "cancelled"]


class ActivityCreate(RequestModel):
    title: str = Field(min_length=1, max_length=200)
    type: ActivityType
    start_date: datetime
    end_date: datetime
    location: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    participant_limit: Optional[int] = Field(default=None, ge=1, description="Omit for unlimited")
    organizer: str = Field(min_length=1, max_length=50)
    requirements: Optional[str] = None
    images: Optional[List[str]] = None
    tags: Optional[List[str]] = None


class ActivityUpdate(RequestModel):
    """participant_count is not here: only join/leave move it."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    type: Optional[ActivityType] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    location: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, min_length=1)
    participant_limit: Optional[int] = Field(default=None, ge=1)
    status: Optional[ActivityStatus] = None
    organizer: Optional[str] = Field(default=None, min_length=1, max_length=50)
    requirements: Optional[str] = None
    images: Optional[List[str]] = None
    tags: Optional[List[str]] = None


class ActivityQuery(ListQuery):
    type: Optional[ActivityType] = None
    status: Optional[ActivityStatus] = None
    title: Optional[str] = None
    location: Optional[str] = None


class ActivityResponse(CamelModel):
    id: int
    title: str
    type: str
    start_date: datetime
    end_date: datetime
    location: str
    description: str
    participant_limit: Optional[int] = None
    participant_count: int
    status: str
    organizer: str
    requirements: Optional[str] = None
    images: Optional[List[str]] = None
    tags: Optional[List[str]] = None
    create_time: datetime
    update_time: datetime


class ActivityStats(CamelModel):
    total: int
    upcoming: int
    ongoing: int
    completed: int
