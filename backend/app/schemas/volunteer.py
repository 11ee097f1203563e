"""Shelter Admin Backend — Volunteer Schemas"""

from datetime import date, datetime
from typing import List, Literal, Optional

from pydantic import EmailStr, Field

from app.schemas.common import CamelModel, ListQuery, RequestModel

VolunteerStatus = Literal["active", "inactive"]


class VolunteerCreate(RequestModel):
    name: str = Field(min_length=1, max_length=100)
    phone: str = Field(min_length=1, max_length=20)
    email: EmailStr
    age: Optional[int] = Field(default=None, ge=0, le=150)
    occupation: Optional[str] = Field(default=None, max_length=100)
    experience: Optional[str] = Field(default=None, max_length=255)
    available_time: Optional[str] = Field(default=None, max_length=100)
    join_date: date
    skills: Optional[List[str]] = None
    avatar: Optional[str] = Field(default=None, max_length=255)
    address: Optional[str] = Field(default=None, max_length=255)


class VolunteerUpdate(RequestModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    phone: Optional[str] = Field(default=None, min_length=1, max_length=20)
    email: Optional[EmailStr] = None
    age: Optional[int] = Field(default=None, ge=0, le=150)
    occupation: Optional[str] = Field(default=None, max_length=100)
    experience: Optional[str] = Field(default=None, max_length=255)
    available_time: Optional[str] = Field(default=None, max_length=100)
    status: Optional[VolunteerStatus] = None
    join_date: Optional[date] = None
    skills: Optional[List[str]] = None
    avatar: Optional[str] = Field(default=None, max_length=255)
    address: Optional[str] = Field(default=None, max_length=255)


class HoursLog(RequestModel):
    """Body of POST /volunteers/{id}/hours: one completed activity."""

    hours: int = Field(gt=0, le=1000)


class VolunteerQuery(ListQuery):
    status: Optional[VolunteerStatus] = None
    name: Optional[str] = None
    skills: Optional[str] = Field(default=None, description="Substring of any listed skill")


class VolunteerResponse(CamelModel):
    id: int
    name: str
    phone: str
    email: str
    age: Optional[int] = None
    occupation: Optional[str] = None
    experience: Optional[str] = None
    available_time: Optional[str] = None
    status: str
    join_date: date
    activities_participated: int
    total_hours: int
    skills: Optional[List[str]] = None
    avatar: Optional[str] = None
    address: Optional[str] = None
    create_time: datetime
    update_time: datetime


class VolunteerStats(CamelModel):
    total: int
    active: int
    inactive: int
    total_hours: int
