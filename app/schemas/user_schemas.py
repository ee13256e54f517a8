from pydantic import Field
from typing import Optional, List

from app.models.subscription import PremiumPlan
from app.schemas.base import CamelModel, UtcDatetime


class UserRegister(CamelModel):
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=1)
    phone: str
    address: str
    city: str
    pincode: str
    college: Optional[str] = None
    interests: List[str] = Field(default_factory=list)


class UserLogin(CamelModel):
    email: str
    password: str


class UserSummary(CamelModel):
    id: int
    first_name: str
    last_name: str
    email: str
    is_premium: bool


class LoginUser(UserSummary):
    wallet_balance: float


class RegisterResponse(CamelModel):
    message: str
    token: str
    user: UserSummary


class LoginResponse(CamelModel):
    message: str
    token: str
    user: LoginUser


class PremiumPlanSummary(CamelModel):
    type: PremiumPlan
    start_date: UtcDatetime
    end_date: UtcDatetime


class UserRead(CamelModel):
    """Full profile view. The password digest is deliberately absent."""

    id: int
    first_name: str
    last_name: str
    email: str
    phone: str
    address: str
    city: str
    pincode: str
    college: Optional[str] = None
    interests: List[str] = []
    is_premium: bool
    premium_plan: Optional[PremiumPlanSummary] = None
    wallet_balance: float
    rating: float
    total_ratings: int
    is_verified: bool
    created_at: UtcDatetime


class ProfileUpdate(CamelModel):
    # password and email are not declared, so they are dropped on input
    first_name: Optional[str] = Field(None, min_length=1)
    last_name: Optional[str] = Field(None, min_length=1)
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    pincode: Optional[str] = None
    college: Optional[str] = None
    interests: Optional[List[str]] = None


class ProfileStats(CamelModel):
    books_listed: int
    books_rented: int
    total_earned: float
    rating: float


class ProfileResponse(CamelModel):
    user: UserRead
    stats: ProfileStats


class ProfileUpdateResponse(CamelModel):
    message: str
    user: UserRead


class OwnerSummary(CamelModel):
    id: int
    first_name: str
    last_name: str
    rating: float


class OwnerDetail(OwnerSummary):
    email: str
    phone: str


class ReviewerName(CamelModel):
    id: int
    first_name: str
    last_name: str
