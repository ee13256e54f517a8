import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session

from app.database import get_session
from app.models.base import utc_now
from app.dependencies.auth import get_current_user
from app.models.subscription import Subscription, SubscriptionStatus
from app.models.user import User
from app.schemas.subscription_schemas import (
    SubscribeRequest, SubscribeResponse, SubscriptionRead, PlanList, PlanRead, Benefits
)
from app.services.pricing import PLANS, add_months
from app.utils.errors import handle_errors
from app.utils.token import TokenClaims

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/plans", response_model=PlanList)
def list_plans():
    return PlanList(
        plans=[
            PlanRead(
                plan=terms.plan,
                amount=terms.amount,
                duration_months=terms.duration_months,
                benefits=Benefits(**terms.benefits),
            )
            for terms in PLANS.values()
        ]
    )


@router.post("/subscribe", response_model=SubscribeResponse, status_code=status.HTTP_201_CREATED)
@handle_errors("Failed to subscribe to premium")
def subscribe(
    payload: SubscribeRequest,
    session: Session = Depends(get_session),
    current_user: TokenClaims = Depends(get_current_user),
):
    terms = PLANS[payload.plan]

    user = session.get(User, current_user.id)
    if not user:
        raise HTTPException(404, "User not found")

    start_date = utc_now()
    subscription = Subscription(
        user_id=user.id,
        plan=terms.plan,
        amount=terms.amount,
        start_date=start_date,
        end_date=add_months(start_date, terms.duration_months),
        status=SubscriptionStatus.active,
        benefits=terms.benefits,
    )

    # premium flag and subscription land in the same commit
    user.is_premium = True
    user.premium_plan = {
        "type": terms.plan.value,
        "start_date": subscription.start_date.isoformat(),
        "end_date": subscription.end_date.isoformat(),
    }

    session.add(subscription)
    session.add(user)
    session.commit()
    session.refresh(subscription)

    logger.info(f"User {user.id} subscribed to {terms.plan.value} plan")

    return SubscribeResponse(
        message="Premium subscription activated",
        subscription=SubscriptionRead.model_validate(subscription),
    )
