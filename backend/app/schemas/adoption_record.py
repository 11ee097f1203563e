"""
Shelter Admin Backend — Adoption Record Schemas
=================================================

What:  Request bodies, list filters and the response shape for /adoption-records.
"""

from datetime import date, datetime
from typing import List, Literal, Optional

from pydantic import Field, model_validator

from app.schemas.common import CamelModel, ListQuery, RequestModel

RecordStatus = Literal["active", "completed", "cancelled"]


class AdoptionRecordCreate(RequestModel):
    adoption_application_id: Optional[int] = Field(default=None, ge=1)
    pet_id: int = Field(ge=1)
    pet_name: str = Field(min_length=1, max_length=100)
    pet_breed: Optional[str] = Field(default=None, max_length=100)
    pet_image: Optional[str] = None
    adopter_id: int = Field(ge=0)
    adopter_name: str = Field(min_length=1, max_length=100)
    adopter_phone: Optional[str] = Field(default=None, max_length=20)
    adopter_email: Optional[str] = Field(default=None, max_length=100)
    adopter_address: Optional[str] = None
    adoption_date: date
    agreement_number: Optional[str] = Field(default=None, max_length=100)
    remarks: Optional[str] = None


class AdoptionRecordUpdate(RequestModel):
    status: Optional[RecordStatus] = None
    adopter_phone: Optional[str] = Field(default=None, max_length=20)
    adopter_email: Optional[str] = Field(default=None, max_length=100)
    adopter_address: Optional[str] = None
    remarks: Optional[str] = None


class FollowUpCreate(RequestModel):
    """
    Body of POST /adoption-records/{id}/follow-up.

    operator defaults to the signed-in user when omitted.
    """

    content: str = Field(min_length=1, max_length=2000)
    operator: Optional[str] = Field(default=None, min_length=1, max_length=50)
    next_follow_up_date: Optional[date] = None


class FollowUpEntry(CamelModel):
    id: str
    date: str = Field(description="ISO-8601 timestamp of the visit log entry")
    content: str
    operator: str
    next_follow_up_date: Optional[str] = None


class AdoptionRecordQuery(ListQuery):
    status: Optional[RecordStatus] = None
    pet_name: Optional[str] = None
    adopter_name: Optional[str] = None
    record_number: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @model_validator(mode="after")
    def check_range(self) -> "AdoptionRecordQuery":
        if self.start_date and self.end_date and self.start_date > self.end_date:
            raise ValueError("startDate must not be after endDate")
        return self


class AdoptionRecordResponse(CamelModel):
    id: str
    adoption_application_id: Optional[int] = None
    record_number: str
    pet_id: int
    pet_name: str
    pet_breed: Optional[str] = None
    pet_image: Optional[str] = None
    adopter_id: int
    adopter_name: str
    adopter_phone: Optional[str] = None
    adopter_email: Optional[str] = None
    adopter_address: Optional[str] = None
    adoption_date: date
    agreement_number: Optional[str] = None
    status: str
    follow_ups: List[FollowUpEntry] = Field(default_factory=list)
    last_follow_up_date: Optional[date] = None
    next_follow_up_date: Optional[date] = None
    remarks: Optional[str] = None
    created_by: Optional[str] = None
    updated_by: Optional[str] = None
    create_time: datetime
    update_time: datetime


class AdoptionRecordStats(CamelModel):
    total: int
    active: int
    completed: int
    cancelled: int
    pending_follow_up: int = Field(description="Active records whose next visit is overdue")
