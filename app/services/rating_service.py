import logging

from sqlmodel import Session, select

from app.models.book import Book
from app.models.review import Review, ReviewType

logger = logging.getLogger(__name__)


def book_reviews(session: Session, book_id: int):
    return session.exec(
        select(Review)
        .where(Review.book_id == book_id, Review.type == ReviewType.book)
        .order_by(Review.created_at.desc(), Review.id.desc())
    ).all()


def recompute_book_rating(session: Session, book: Book) -> Book:
    """Rescan every review of `book` and store the plain mean and the count.

    Does not commit; the caller commits together with the new review.
    """
    reviews = book_reviews(session, book.id)

    book.average_rating = (
        sum(r.rating for r in reviews) / len(reviews)
        if reviews else 0.0
    )
    book.total_reviews = len(reviews)
    session.add(book)

    logger.info(f"Book {book.id} rating now {book.average_rating:.2f} over {len(reviews)} reviews")
    return book
