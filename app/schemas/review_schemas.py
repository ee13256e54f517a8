from pydantic import Field
from typing import Annotated, List, Literal, Union

from app.models.review import Review, ReviewType
from app.schemas.base import CamelModel, UtcDatetime


class ReviewCreate(CamelModel):
    rating: int = Field(..., ge=1, le=5)
    comment: str = Field(..., min_length=1)


class _ReviewReadBase(CamelModel):
    id: int
    reviewer_id: int
    rating: int
    comment: str
    helpful: int
    images: List[str] = []
    created_at: UtcDatetime


class BookReviewRead(_ReviewReadBase):
    type: Literal[ReviewType.book]
    book_id: int
    transaction_id: int


class UserReviewRead(_ReviewReadBase):
    type: Literal[ReviewType.user]
    reviewee_id: int


class TransactionReviewRead(_ReviewReadBase):
    type: Literal[ReviewType.transaction]
    transaction_id: int


ReviewRead = Annotated[
    Union[BookReviewRead, UserReviewRead, TransactionReviewRead],
    Field(discriminator="type"),
]


def to_review_read(review: Review):
    if review.type == ReviewType.book:
        return BookReviewRead.model_validate(review)
    if review.type == ReviewType.user:
        return UserReviewRead.model_validate(review)
    if review.type == ReviewType.transaction:
        return TransactionReviewRead.model_validate(review)
    raise ValueError(f"Unknown review type: {review.type!r}")


class ReviewCreateResponse(CamelModel):
    message: str
    review: ReviewRead


class BookReviewList(CamelModel):
    book_id: int
    average_rating: float
    total_reviews: int
    reviews: List[ReviewRead]
