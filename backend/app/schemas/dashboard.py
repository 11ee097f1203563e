"""Shelter Admin Backend — Dashboard Schemas"""

from typing import List

from app.schemas.common import CamelModel


class Overview(CamelModel):
    total_pets: int
    pending_adoptions: int
    adopted_pets: int
    active_volunteers: int


class TrendPoint(CamelModel):
    name: str
    apps: int


class DistributionSlice(CamelModel):
    name: str
    value: int


class RecentApplication(CamelModel):
    application_id: int
    user_id: int = 0
    pet_id: int
    applicant_name: str
    pet_name: str
    status: str
    application_date: str


class Dashboard(CamelModel):
    overview: Overview
    adoption_trend: List[TrendPoint]
    pet_type_distribution: List[DistributionSlice]
    recent_applications: List[RecentApplication]
