from sqlmodel import SQLModel, Field, Relationship
from sqlalchemy import Column, JSON
from typing import Optional, List, TYPE_CHECKING
from datetime import datetime

from enum import Enum

from app.models.base import AwareDateTime, utc_now


if TYPE_CHECKING:
    from app.models.user import User


class ListingType(str, Enum):
    rent = "rent"
    sell = "sell"


class BookCondition(str, Enum):
    new = "new"
    excellent = "excellent"
    good = "good"
    fair = "fair"


class DeliveryOption(str, Enum):
    pickup = "pickup"
    delivery = "delivery"
    both = "both"


class RentalStatus(str, Enum):
    active = "active"
    completed = "completed"
    cancelled = "cancelled"


def default_availability() -> dict:
    return {"is_available": True, "available_from": None, "minimum_duration": None}


class Book(SQLModel, table=True):
    #main info
    id: Optional[int] = Field(default=None, primary_key=True)
    title: str
    author: str
    isbn: Optional[str] = None
    category: str = Field(index=True)
    language: str
    publisher: str
    publish_year: int
    edition: Optional[str] = None
    pages: Optional[int] = None

    #pricing
    mrp: float
    selling_price: float
    listing_type: ListingType

    #condition
    condition: BookCondition
    condition_notes: Optional[str] = None
    description: str
    highlights: Optional[str] = None

    # {front_cover, back_cover, first_page, additional[]}
    images: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    #ownership, immutable after listing
    owner_id: int = Field(foreign_key="user.id", index=True)
    owner: Optional["User"] = Relationship()

    # {city, area, pincode}
    location: Optional[dict] = Field(default=None, sa_column=Column(JSON))
    delivery_options: Optional[DeliveryOption] = None
    availability: dict = Field(default_factory=default_availability, sa_column=Column(JSON))

    # embedded sub-records: [{renter, start_date, end_date, status}]
    rentals: List[dict] = Field(default_factory=list, sa_column=Column(JSON))
    # [{reviewer, rating, comment, date}]
    reviews: List[dict] = Field(default_factory=list, sa_column=Column(JSON))

    #ratings
    average_rating: float = Field(default=0)
    total_reviews: int = Field(default=0)

    created_at: datetime = Field(default_factory=utc_now, sa_type=AwareDateTime)
    views: int = Field(default=0)

    @property
    def is_available(self) -> bool:
        return bool((self.availability or {}).get("is_available", True))
