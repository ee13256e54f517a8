"""Rental pricing and premium plan terms.

Pure functions only; the routes persist whatever these return.
"""
import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Dict

from app.models.subscription import PremiumPlan

MONTHLY_RENTAL_RATE = 0.15
ADVANCE_RATE = 0.40
DAYS_PER_MONTH = 30


def round_half_up(value: float) -> int:
    # .5 always rounds up, unlike round() which rounds half to even
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class RentalQuote:
    monthly_rental: int
    advance_amount: int
    total_amount: int
    final_advance: int

    @property
    def payment_required(self) -> int:
        """First month plus whatever advance is still due."""
        return self.final_advance + self.monthly_rental


def quote_rental(mrp: float, rental_duration: int, is_premium: bool) -> RentalQuote:
    monthly_rental = round_half_up(mrp * MONTHLY_RENTAL_RATE)
    advance_amount = round_half_up(mrp * ADVANCE_RATE)
    return RentalQuote(
        monthly_rental=monthly_rental,
        advance_amount=advance_amount,
        total_amount=monthly_rental * rental_duration,
        final_advance=0 if is_premium else advance_amount,
    )


def add_months(start: datetime, months: int) -> datetime:
    """Fixed 30-day months, not calendar aware."""
    return start + timedelta(days=months * DAYS_PER_MONTH)


@dataclass(frozen=True)
class PlanTerms:
    plan: PremiumPlan
    amount: int
    duration_months: int
    discount_percentage: int
    free_rentals: int
    free_delivery: bool = True
    no_advance_payment: bool = True

    @property
    def benefits(self) -> Dict:
        return {
            "discount_percentage": self.discount_percentage,
            "free_rentals": self.free_rentals,
            "free_delivery": self.free_delivery,
            "no_advance_payment": self.no_advance_payment,
        }


PLANS: Dict[PremiumPlan, PlanTerms] = {
    PremiumPlan.monthly: PlanTerms(PremiumPlan.monthly, 99, 1, 10, 0),
    PremiumPlan.quarterly: PlanTerms(PremiumPlan.quarterly, 249, 3, 15, 2),
    PremiumPlan.annual: PlanTerms(PremiumPlan.annual, 899, 12, 20, 5),
}

