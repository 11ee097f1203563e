"""
Shelter Admin Backend — Pet Schemas
=====================================

What:  Request bodies, list filters and the response shape for /pets.
"""

from datetime import date, datetime
from typing import Annotated, List, Literal, Optional

from pydantic import AfterValidator, Field, HttpUrl

from app.schemas.common import CamelModel, ListQuery, RequestModel

PetType = Literal["dog", "cat", "rabbit", "bird", "hamster", "other"]
Gender = Literal["male", "female"]
HealthStatus = Literal["healthy", "treating", "recovered", "critical"]
AdoptionStatus = Literal["available", "pending", "adopted", "unavailable"]

# Validated as a URL, stored as the plain string
ImageUrl = Annotated[HttpUrl, AfterValidator(str)]


class PetCreate(RequestModel):
    name: str = Field(min_length=1, max_length=100)
    type: PetType
    breed: str = Field(min_length=1, max_length=50)
    age: float = Field(ge=0, lt=100, description="Years, one decimal place")
    gender: Gender
    weight: Optional[float] = Field(default=None, ge=0, lt=1000, description="Kilograms")
    color: Optional[str] = Field(default=None, max_length=50)
    health_status: HealthStatus = "healthy"
    adoption_status: AdoptionStatus = "available"
    description: Optional[str] = None
    images: Optional[List[ImageUrl]] = None
    location: Optional[str] = Field(default=None, max_length=255)
    rescue_date: Optional[date] = None
    rescuer: Optional[str] = Field(default=None, max_length=50)
    tags: Optional[List[str]] = None


class PetUpdate(RequestModel):
    """Every field optional; only the fields sent are written."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    type: Optional[PetType] = None
    breed: Optional[str] = Field(default=None, min_length=1, max_length=50)
    age: Optional[float] = Field(default=None, ge=0, lt=100)
    gender: Optional[Gender] = None
    weight: Optional[float] = Field(default=None, ge=0, lt=1000)
    color: Optional[str] = Field(default=None, max_length=50)
    health_status: Optional[HealthStatus] = None
    adoption_status: Optional[AdoptionStatus] = None
    description: Optional[str] = None
    images: Optional[List[ImageUrl]] = None
    location: Optional[str] = Field(default=None, max_length=255)
    rescue_date: Optional[date] = None
    rescuer: Optional[str] = Field(default=None, max_length=50)
    tags: Optional[List[str]] = None
    adopted_by: Optional[str] = Field(default=None, max_length=100)
    adopted_date: Optional[date] = None


class PetQuery(ListQuery):
    type: Optional[PetType] = None
    gender: Optional[Gender] = None
    health_status: Optional[HealthStatus] = None
    adoption_status: Optional[AdoptionStatus] = None
    location: Optional[str] = Field(default=None, description="Substring match")


class PetResponse(CamelModel):
    id: int
    name: str
    type: str
    breed: str
    age: float
    gender: str
    weight: Optional[float] = None
    color: Optional[str] = None
    health_status: str
    adoption_status: str
    description: Optional[str] = None
    images: Optional[List[str]] = None
    location: Optional[str] = None
    rescue_date: Optional[date] = None
    rescuer: Optional[str] = None
    tags: Optional[List[str]] = None
    view_count: int
    favorite_count: int
    adopted_by: Optional[str] = None
    adopted_date: Optional[date] = None
    create_time: datetime
    update_time: datetime


class PetStats(CamelModel):
    total: int
    available: int
    adopted: int
    treating: int
