"""Shelter Admin Backend — Donation Schemas"""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field

from app.schemas.common import MAX_MONEY, CamelModel, ListQuery, RequestModel

DonorType = Literal["individual", "organization"]
DonationType = Literal["money", "goods"]
DonationStatus = Literal["pending", "confirmed", "cancelled"]


class DonationItem(CamelModel):
    """One line of an in-kind donation."""

    name: str = Field(min_length=1)
    quantity: float = Field(gt=0)
    unit: Optional[str] = None
    estimated_value: Optional[float] = Field(default=None, ge=0)


class DonationCreate(RequestModel):
    donor_name: str = Field(min_length=1, max_length=100)
    donor_type: DonorType = "individual"
    amount: float = Field(ge=0, lt=MAX_MONEY)
    donation_date: Optional[datetime] = Field(default=None, description="Defaults to now")
    donation_type: DonationType = "money"
    purpose: Optional[str] = Field(default=None, max_length=100)
    payment_method: Optional[str] = Field(default=None, max_length=50)
    transaction_id: Optional[str] = Field(default=None, max_length=100)
    remarks: Optional[str] = None
    items: Optional[List[DonationItem]] = None
    total_value: Optional[float] = Field(default=None, ge=0, lt=MAX_MONEY)


class DonationUpdate(RequestModel):
    donor_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    donor_type: Optional[DonorType] = None
    amount: Optional[float] = Field(default=None, ge=0, lt=MAX_MONEY)
    donation_date: Optional[datetime] = None
    donation_type: Optional[DonationType] = None
    purpose: Optional[str] = Field(default=None, max_length=100)
    status: Optional[DonationStatus] = None
    payment_method: Optional[str] = Field(default=None, max_length=50)
    transaction_id: Optional[str] = Field(default=None, max_length=100)
    remarks: Optional[str] = None
    items: Optional[List[DonationItem]] = None
    total_value: Optional[float] = Field(default=None, ge=0, lt=MAX_MONEY)


class DonationQuery(ListQuery):
    status: Optional[DonationStatus] = None
    donor_name: Optional[str] = None
    donation_type: Optional[DonationType] = None
    donor_type: Optional[DonorType] = None


class DonationResponse(CamelModel):
    id: int
    donor_name: str
    donor_type: str
    amount: float
    donation_date: datetime
    donation_type: str
    purpose: Optional[str] = None
    status: str
    payment_method: Optional[str] = None
    transaction_id: Optional[str] = None
    remarks: Optional[str] = None
    receipt_issued: bool
    items: Optional[List[DonationItem]] = None
    total_value: Optional[float] = None
    create_time: datetime
    update_time: datetime


class DonationStats(CamelModel):
    total: int
    pending: int
    confirmed: int
    total_amount: float = Field(description="Sum of confirmed donation amounts")
