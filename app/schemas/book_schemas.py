from pydantic import Field
from typing import Optional, List

from app.models.book import ListingType, BookCondition, DeliveryOption, RentalStatus
from app.schemas.base import CamelModel, UtcDatetime
from app.schemas.user_schemas import OwnerSummary, OwnerDetail, ReviewerName


class BookImages(CamelModel):
    front_cover: Optional[str] = None
    back_cover: Optional[str] = None
    first_page: Optional[str] = None
    additional: List[str] = Field(default_factory=list)


class BookLocation(CamelModel):
    city: Optional[str] = None
    area: Optional[str] = None
    pincode: Optional[str] = None


class BookAvailability(CamelModel):
    is_available: bool = True
    available_from: Optional[UtcDatetime] = None
    minimum_duration: Optional[int] = Field(None, ge=1)  # months


class RentalEntry(CamelModel):
    renter: int
    start_date: UtcDatetime
    end_date: UtcDatetime
    status: RentalStatus


class EmbeddedReview(CamelModel):
    reviewer: int
    rating: int
    comment: str
    date: UtcDatetime


class ResolvedReview(CamelModel):
    reviewer: Optional[ReviewerName] = None
    rating: int
    comment: str
    date: UtcDatetime


class BookCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    author: str = Field(..., min_length=1, max_length=100)
    isbn: Optional[str] = None
    category: str
    language: str
    publisher: str
    publish_year: int
    edition: Optional[str] = None
    pages: Optional[int] = Field(None, ge=1)

    mrp: float = Field(..., ge=0)
    selling_price: float = Field(..., ge=0)
    listing_type: ListingType

    condition: BookCondition
    condition_notes: Optional[str] = None
    description: str
    highlights: Optional[str] = None

    images: Optional[BookImages] = None
    location: Optional[BookLocation] = None
    delivery_options: Optional[DeliveryOption] = None
    availability: BookAvailability = Field(default_factory=BookAvailability)


class BookRead(CamelModel):
    id: int
    title: str
    author: str
    isbn: Optional[str] = None
    category: str
    language: str
    publisher: str
    publish_year: int
    edition: Optional[str] = None
    pages: Optional[int] = None

    mrp: float
    selling_price: float
    listing_type: ListingType

    condition: BookCondition
    condition_notes: Optional[str] = None
    description: str
    highlights: Optional[str] = None

    images: Optional[BookImages] = None
    owner: Optional[OwnerSummary] = None
    location: Optional[BookLocation] = None
    delivery_options: Optional[DeliveryOption] = None
    availability: BookAvailability

    rentals: List[RentalEntry] = []
    reviews: List[EmbeddedReview] = []
    average_rating: float
    total_reviews: int

    created_at: UtcDatetime
    views: int


class BookDetail(BookRead):
    owner: Optional[OwnerDetail] = None
    reviews: List[ResolvedReview] = []


class Pagination(CamelModel):
    total: int
    page: int
    pages: int


class BookList(CamelModel):
    books: List[BookRead]
    pagination: Pagination


class BookCreateResponse(CamelModel):
    message: str
    book: BookRead
