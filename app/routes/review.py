import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session, select

from app.database import get_session
from app.dependencies.auth import get_current_user
from app.models.base import utc_now
from app.models.book import Book
from app.models.review import Review, ReviewType
from app.models.transaction import Transaction, REVIEWABLE_STATUSES
from app.schemas.review_schemas import (
    ReviewCreate, ReviewCreateResponse, BookReviewList, to_review_read
)
from app.services.rating_service import book_reviews, recompute_book_rating
from app.utils.errors import handle_errors
from app.utils.token import TokenClaims

logger = logging.getLogger(__name__)

router = APIRouter()


@handle_errors("Failed to add review")
def get_review_entitlement(
    book_id: int,
    session: Session = Depends(get_session),
    current_user: TokenClaims = Depends(get_current_user),
) -> Transaction:
    """Transaction that lets the caller review `book_id`.

    Resolved as a dependency, so a caller without one gets 403 before the
    review body is validated.
    """
    # only renters / buyers with an active or completed transaction may review
    transaction = session.exec(
        select(Transaction).where(
            Transaction.book_id == book_id,
            Transaction.buyer_id == current_user.id,
            Transaction.status.in_(REVIEWABLE_STATUSES),
        )
    ).first()

    if not transaction:
        raise HTTPException(403, "You can only review books you have rented or purchased")

    return transaction


# ---------------------------------------------------------
# CREATE A BOOK REVIEW
# ---------------------------------------------------------
@router.post("/book/{book_id}", response_model=ReviewCreateResponse, status_code=status.HTTP_201_CREATED)
@handle_errors("Failed to add review")
def create_book_review(
    book_id: int,
    data: ReviewCreate,
    transaction: Transaction = Depends(get_review_entitlement),
    session: Session = Depends(get_session),
    current_user: TokenClaims = Depends(get_current_user),
):
    # row lock serializes concurrent reviews of the same book
    book = session.exec(
        select(Book).where(Book.id == book_id).with_for_update()
    ).first()

    if not book:
        raise HTTPException(404, "Book not found")

    review = Review(
        type=ReviewType.book,
        book_id=book.id,
        transaction_id=transaction.id,
        reviewer_id=current_user.id,
        rating=data.rating,
        comment=data.comment,
    )
    session.add(review)

    book.reviews = [
        *book.reviews,
        {
            "reviewer": current_user.id,
            "rating": data.rating,
            "comment": data.comment,
            "date": utc_now().isoformat(),
        },
    ]
    recompute_book_rating(session, book)

    session.commit()
    session.refresh(review)

    logger.info(f"User {current_user.id} reviewed book {book.id}")

    return ReviewCreateResponse(message="Review added successfully", review=to_review_read(review))


# ---------------------------------------------------------
# LIST REVIEWS FOR A BOOK
# ---------------------------------------------------------
@router.get("/book/{book_id}", response_model=BookReviewList)
@handle_errors("Failed to fetch reviews")
def list_book_reviews(book_id: int, session: Session = Depends(get_session)):
    book = session.get(Book, book_id)
    if not book:
        raise HTTPException(404, "Book not found")

    reviews = book_reviews(session, book_id)

    return BookReviewList(
        book_id=book.id,
        average_rating=book.average_rating,
        total_reviews=book.total_reviews,
        reviews=[to_review_read(r) for r in reviews],
    )
