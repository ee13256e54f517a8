from sqlmodel import SQLModel, Field
from sqlalchemy import Column, JSON
from typing import Optional
from datetime import datetime

from enum import Enum

from app.models.base import AwareDateTime, utc_now


class TransactionType(str, Enum):
    rent = "rent"
    purchase = "purchase"


class TransactionStatus(str, Enum):
    pending = "pending"
    paid = "paid"
    active = "active"
    completed = "completed"
    cancelled = "cancelled"
    refunded = "refunded"


# statuses that entitle the buyer to review the book
REVIEWABLE_STATUSES = (TransactionStatus.active, TransactionStatus.completed)


class Transaction(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    book_id: int = Field(foreign_key="book.id", index=True)
    seller_id: int = Field(foreign_key="user.id", index=True)
    buyer_id: int = Field(foreign_key="user.id", index=True)

    transaction_type: TransactionType
    amount: float
    advance_amount: Optional[float] = None
    monthly_rental: Optional[float] = None
    rental_duration: Optional[int] = None  # months

    status: TransactionStatus = Field(default=TransactionStatus.pending)

    # {method, transaction_id, paid_at}
    payment_details: Optional[dict] = Field(default=None, sa_column=Column(JSON))
    # {start_date, end_date, return_date, condition}
    rental: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    created_at: datetime = Field(default_factory=utc_now, sa_type=AwareDateTime)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=AwareDateTime)
