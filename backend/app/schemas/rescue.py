"""Shelter Admin Backend — Rescue Schemas"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from app.schemas.common import MAX_MONEY, CamelModel, ListQuery, RequestModel


class RescueCreate(RequestModel):
    pet_id: int = Field(ge=1)
    pet_name: str = Field(min_length=1, max_length=100)
    rescue_date: datetime
    rescue_location: str = Field(min_length=1, max_length=255)
    rescuer: str = Field(min_length=1, max_length=50)
    rescue_type: str = Field(min_length=1, max_length=50)
    description: str = Field(min_length=1)
    health_condition: str = Field(min_length=1, max_length=50)
    immediate_action: str = Field(min_length=1, max_length=255)
    images: Optional[List[str]] = None
    video_url: Optional[str] = Field(default=None, max_length=255)
    cost: Optional[float] = Field(default=None, ge=0, lt=MAX_MONEY)
    notes: Optional[str] = None


class RescueUpdate(RequestModel):
    pet_id: Optional[int] = Field(default=None, ge=1)
    pet_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    rescue_date: Optional[datetime] = None
    rescue_location: Optional[str] = Field(default=None, min_length=1, max_length=255)
    rescuer: Optional[str] = Field(default=None, min_length=1, max_length=50)
    rescue_type: Optional[str] = Field(default=None, min_length=1, max_length=50)
    description: Optional[str] = Field(default=None, min_length=1)
    health_condition: Optional[str] = Field(default=None, min_length=1, max_length=50)
    immediate_action: Optional[str] = Field(default=None, min_length=1, max_length=255)
    images: Optional[List[str]] = None
    video_url: Optional[str] = Field(default=None, max_length=255)
    cost: Optional[float] = Field(default=None, ge=0, lt=MAX_MONEY)
    notes: Optional[str] = None


class RescueQuery(ListQuery):
    rescuer: Optional[str] = None
    rescue_type: Optional[str] = None
    health_condition: Optional[str] = None
    rescue_location: Optional[str] = None


class RescueResponse(CamelModel):
    id: int
    pet_id: int
    pet_name: str
    rescue_date: datetime
    rescue_location: str
    rescuer: str
    rescue_type: str
    description: str
    health_condition: str
    immediate_action: str
    images: Optional[List[str]] = None
    video_url: Optional[str] = None
    cost: Optional[float] = None
    notes: Optional[str] = None
    create_time: datetime
    update_time: datetime


class RescueStats(CamelModel):
    total: int
    critical: int = Field(description="Rescues whose health condition is 'critical'")
    healthy: int = Field(description="Rescues whose health condition is 'healthy'")
    total_cost: float
