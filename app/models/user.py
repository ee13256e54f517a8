from sqlmodel import SQLModel, Field
from sqlalchemy import Column, JSON
from typing import Optional, List
from datetime import datetime

from app.models.base import AwareDateTime, utc_now


class User(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    first_name: str
    last_name: str
    email: str = Field(index=True, unique=True)
    password: str
    phone: str
    address: str
    city: str
    pincode: str
    college: Optional[str] = None
    interests: List[str] = Field(default_factory=list, sa_column=Column(JSON))

    # premium summary, kept in sync by the subscribe route
    is_premium: bool = Field(default=False)
    premium_plan: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    wallet_balance: float = Field(default=0)
    rating: float = Field(default=0)
    total_ratings: int = Field(default=0)
    is_verified: bool = Field(default=False)
    created_at: datetime = Field(default_factory=utc_now, sa_type=AwareDateTime)
