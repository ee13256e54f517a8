from sqlmodel import SQLModel, Field
from sqlalchemy import Column, JSON
from typing import Optional, List
from datetime import datetime

from enum import Enum

from app.models.base import AwareDateTime, utc_now


class ReviewType(str, Enum):
    book = "book"
    user = "user"
    transaction = "transaction"


class Review(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    type: ReviewType

    # target columns; which ones are set depends on `type`
    book_id: Optional[int] = Field(default=None, foreign_key="book.id", index=True)
    transaction_id: Optional[int] = Field(default=None, foreign_key="transaction.id")
    reviewee_id: Optional[int] = Field(default=None, foreign_key="user.id")

    reviewer_id: int = Field(foreign_key="user.id")
    rating: int
    comment: str
    helpful: int = Field(default=0)
    images: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    created_at: datetime = Field(default_factory=utc_now, sa_type=AwareDateTime)
