"""
Shelter Admin Backend — Adoption Application Schemas
======================================================

What:  Request bodies, list filters and the response shape for /adoptions.

ReviewDecision carries the approve/reject outcome. A rejection without a
reason fails validation before the service is called.
"""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import EmailStr, Field, model_validator

from app.schemas.common import CamelModel, ListQuery, RequestModel

AdoptionStatus = Literal["pending", "approved", "rejected", "cancelled"]


class ReviewNote(CamelModel):
    date: str
    content: str
    operator: str


class AdoptionCreate(RequestModel):
    pet_id: int = Field(ge=1)
    pet_name: str = Field(min_length=1, max_length=100)
    applicant_name: str = Field(min_length=1, max_length=100)
    applicant_phone: str = Field(min_length=1, max_length=20)
    applicant_email: EmailStr
    applicant_id_card: str = Field(min_length=1, max_length=20)
    applicant_address: str = Field(min_length=1)
    experience: Optional[str] = Field(default=None, max_length=100)
    housing_type: Optional[str] = Field(default=None, max_length=50)
    has_yard: bool = False
    family_members: Optional[int] = Field(default=None, ge=1)
    work_hours: Optional[str] = Field(default=None, max_length=50)
    remarks: Optional[str] = None


class AdoptionUpdate(RequestModel):
    pet_id: Optional[int] = Field(default=None, ge=1)
    pet_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    applicant_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    applicant_phone: Optional[str] = Field(default=None, min_length=1, max_length=20)
    applicant_email: Optional[EmailStr] = None
    applicant_id_card: Optional[str] = Field(default=None, min_length=1, max_length=20)
    applicant_address: Optional[str] = Field(default=None, min_length=1)
    experience: Optional[str] = Field(default=None, max_length=100)
    housing_type: Optional[str] = Field(default=None, max_length=50)
    has_yard: Optional[bool] = None
    family_members: Optional[int] = Field(default=None, ge=1)
    work_hours: Optional[str] = Field(default=None, max_length=50)
    remarks: Optional[str] = None


class ReviewDecision(RequestModel):
    """Body of POST /adoptions/{id}/approve."""

    status: Literal["approved", "rejected"]
    approver: Optional[str] = Field(default=None, max_length=50)
    rejecter: Optional[str] = Field(default=None, max_length=50)
    reject_reason: Optional[str] = None
    remarks: Optional[str] = None

    @model_validator(mode="after")
    def require_reason_for_rejection(self) -> "ReviewDecision":
        if self.status == "rejected" and not (self.reject_reason or "").strip():
            raise ValueError("rejectReason is required when rejecting an application")
        return self


class AdoptionQuery(ListQuery):
    status: Optional[AdoptionStatus] = None
    applicant_name: Optional[str] = None
    pet_name: Optional[str] = None


class AdoptionResponse(CamelModel):
    id: int
    pet_id: int
    pet_name: str
    applicant_name: str
    applicant_phone: str
    applicant_email: str
    applicant_id_card: str
    applicant_address: str
    application_date: datetime
    status: str
    approval_date: Optional[datetime] = None
    approver: Optional[str] = None
    rejection_date: Optional[datetime] = None
    rejecter: Optional[str] = None
    reject_reason: Optional[str] = None
    remarks: Optional[str] = None
    experience: Optional[str] = None
    housing_type: Optional[str] = None
    has_yard: bool
    family_members: Optional[int] = None
    work_hours: Optional[str] = None
    review_notes: Optional[List[ReviewNote]] = None
    create_time: datetime
    update_time: datetime


class AdoptionStats(CamelModel):
    total: int
    pending: int
    approved: int
    rejected: int
