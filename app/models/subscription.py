from sqlmodel import SQLModel, Field
from sqlalchemy import Column, JSON
from typing import Optional
from datetime import datetime

from enum import Enum

from app.models.base import AwareDateTime, utc_now


class PremiumPlan(str, Enum):
    monthly = "monthly"
    quarterly = "quarterly"
    annual = "annual"


class SubscriptionStatus(str, Enum):
    active = "active"
    expired = "expired"
    cancelled = "cancelled"


class Subscription(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", index=True)
    plan: PremiumPlan
    amount: float
    start_date: datetime = Field(default_factory=utc_now, sa_type=AwareDateTime)
    end_date: datetime = Field(sa_type=AwareDateTime)
    status: SubscriptionStatus = Field(default=SubscriptionStatus.active)

    # {discount_percentage, free_rentals, free_delivery, no_advance_payment}
    benefits: dict = Field(default_factory=dict, sa_column=Column(JSON))
    # {method, transaction_id}
    payment_details: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    created_at: datetime = Field(default_factory=utc_now, sa_type=AwareDateTime)
