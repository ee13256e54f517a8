from typing import Optional, List

from app.models.subscription import PremiumPlan, SubscriptionStatus
from app.schemas.base import CamelModel, UtcDatetime


class SubscribeRequest(CamelModel):
    plan: PremiumPlan


class Benefits(CamelModel):
    discount_percentage: int
    free_rentals: int
    free_delivery: bool
    no_advance_payment: bool


class SubscriptionPayment(CamelModel):
    method: Optional[str] = None
    transaction_id: Optional[str] = None


class SubscriptionRead(CamelModel):
    id: int
    user_id: int
    plan: PremiumPlan
    amount: float
    start_date: UtcDatetime
    end_date: UtcDatetime
    status: SubscriptionStatus
    benefits: Benefits
    payment_details: Optional[SubscriptionPayment] = None
    created_at: UtcDatetime


class SubscribeResponse(CamelModel):
    message: str
    subscription: SubscriptionRead


class PlanRead(CamelModel):
    plan: PremiumPlan
    amount: int
    duration_months: int
    benefits: Benefits


class PlanList(CamelModel):
    plans: List[PlanRead]
