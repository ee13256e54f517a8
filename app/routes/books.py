import logging
from typing import Optional
from enum import Enum

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import update
from sqlmodel import Session, select

from app.database import get_session
from app.dependencies.auth import get_current_user
from app.models.book import Book, BookCondition, ListingType
from app.models.user import User
from app.schemas.book_schemas import (
    BookCreate, BookRead, BookDetail, BookList, BookCreateResponse, Pagination, ResolvedReview
)
from app.schemas.user_schemas import OwnerSummary, OwnerDetail, ReviewerName
from app.utils.errors import handle_errors
from app.utils.pagination import paginate
from app.utils.token import TokenClaims

logger = logging.getLogger(__name__)

router = APIRouter()


class BookSort(str, Enum):
    price_low = "price_low"
    price_high = "price_high"
    newest = "newest"
    rating = "rating"


SORT_ORDER = {
    BookSort.price_low: (Book.selling_price.asc(), Book.id.asc()),
    BookSort.price_high: (Book.selling_price.desc(), Book.id.desc()),
    BookSort.newest: (Book.created_at.desc(), Book.id.desc()),
    BookSort.rating: (Book.average_rating.desc(), Book.id.desc()),
}


def serialize_book(book: Book) -> BookRead:
    data = book.model_dump()
    data["owner"] = OwnerSummary.model_validate(book.owner) if book.owner else None
    return BookRead.model_validate(data)


def serialize_book_detail(session: Session, book: Book) -> BookDetail:
    reviewer_ids = {entry.get("reviewer") for entry in book.reviews}
    reviewers = {}
    if reviewer_ids:
        users = session.exec(select(User).where(User.id.in_(reviewer_ids))).all()
        reviewers = {u.id: ReviewerName.model_validate(u) for u in users}

    data = book.model_dump()
    data["owner"] = OwnerDetail.model_validate(book.owner) if book.owner else None
    data["reviews"] = [
        ResolvedReview(
            reviewer=reviewers.get(entry.get("reviewer")),
            rating=entry["rating"],
            comment=entry["comment"],
            date=entry["date"],
        )
        for entry in book.reviews
    ]
    return BookDetail.model_validate(data)


# ------------------ LIST / FILTER BOOKS ------------------
@router.get("", response_model=BookList)
@handle_errors("Failed to fetch books")
def list_books(
    category: Optional[str] = None,
    language: Optional[str] = None,
    condition: Optional[BookCondition] = None,
    listing_type: Optional[ListingType] = Query(None, alias="listingType"),
    min_price: Optional[float] = Query(None, alias="minPrice"),
    max_price: Optional[float] = Query(None, alias="maxPrice"),
    search: Optional[str] = None,
    sort: Optional[str] = None,
    page: int = Query(1, ge=1),
    limit: int = Query(12, ge=1),
    session: Session = Depends(get_session),
):
    query = select(Book)

    if category:
        query = query.where(Book.category == category)

    if language:
        query = query.where(Book.language == language)

    if condition:
        query = query.where(Book.condition == condition)

    if listing_type:
        query = query.where(Book.listing_type == listing_type)

    # PRICE FILTER
    if min_price is not None:
        query = query.where(Book.selling_price >= min_price)

    if max_price is not None:
        query = query.where(Book.selling_price <= max_price)

    # case-insensitive substring over title, author and isbn
    if search:
        query = query.where(
            Book.title.icontains(search, autoescape=True) |
            Book.author.icontains(search, autoescape=True) |
            Book.isbn.icontains(search, autoescape=True)
        )

    # unrecognised sort keys fall back to newest first
    query = query.order_by(*SORT_ORDER.get(sort, SORT_ORDER[BookSort.newest]))

    result = paginate(session=session, query=query, page=page, limit=limit)

    return BookList(
        books=[serialize_book(book) for book in result["results"]],
        pagination=Pagination(
            total=result["total"],
            page=result["page"],
            pages=result["pages"],
        ),
    )


# ------------------ BOOK DETAIL ------------------
@router.get("/{book_id}", response_model=BookDetail)
@handle_errors("Failed to fetch book")
def get_book(book_id: int, session: Session = Depends(get_session)):
    book = session.get(Book, book_id)
    if not book:
        raise HTTPException(404, "Book not found")

    # atomic increment, persisted before the response is built
    session.execute(
        update(Book).where(Book.id == book_id).values(views=Book.views + 1)
    )
    session.commit()
    session.refresh(book)

    return serialize_book_detail(session, book)


# ------------------ CREATE LISTING ------------------
@router.post("", response_model=BookCreateResponse, status_code=status.HTTP_201_CREATED)
@handle_errors("Failed to create book listing")
def create_book(
    payload: BookCreate,
    session: Session = Depends(get_session),
    current_user: TokenClaims = Depends(get_current_user),
):
    # owner always comes from the token, never from the body
    book = Book(
        **payload.model_dump(mode="json", exclude={"listing_type", "condition", "delivery_options"}),
        listing_type=payload.listing_type,
        condition=payload.condition,
        delivery_options=payload.delivery_options,
        owner_id=current_user.id,
    )

    session.add(book)
    session.commit()
    session.refresh(book)

    logger.info(f"User {current_user.id} listed book {book.id}")

    return BookCreateResponse(message="Book listed successfully", book=serialize_book(book))
