import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session

from app.database import get_session
from app.models.base import utc_now
from app.dependencies.auth import get_current_user
from app.models.book import Book
from app.models.transaction import Transaction, TransactionType, TransactionStatus
from app.models.user import User
from app.schemas.transaction_schemas import RentRequest, RentResponse, TransactionRead
from app.services.pricing import quote_rental, add_months
from app.utils.errors import handle_errors
from app.utils.token import TokenClaims

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/rent", response_model=RentResponse, status_code=status.HTTP_201_CREATED)
@handle_errors("Failed to create transaction")
def create_rental(
    payload: RentRequest,
    session: Session = Depends(get_session),
    current_user: TokenClaims = Depends(get_current_user),
):
    book = session.get(Book, payload.book_id)
    if not book:
        raise HTTPException(404, "Book not found")

    # no lock is held between this check and the insert, and renting never
    # clears availability, so overlapping rentals of one book are accepted
    if not book.is_available:
        raise HTTPException(400, "Book is not available for rent")

    renter = session.get(User, current_user.id)
    if not renter:
        raise HTTPException(404, "User not found")

    quote = quote_rental(book.mrp, payload.rental_duration, renter.is_premium)

    start_date = utc_now()
    end_date = add_months(start_date, payload.rental_duration)

    transaction = Transaction(
        book_id=book.id,
        seller_id=book.owner_id,
        buyer_id=renter.id,
        transaction_type=TransactionType.rent,
        amount=quote.total_amount,
        advance_amount=quote.final_advance,
        monthly_rental=quote.monthly_rental,
        rental_duration=payload.rental_duration,
        status=TransactionStatus.pending,
        rental={
            "start_date": start_date.isoformat(),
            "end_date": end_date.isoformat(),
            "return_date": None,
            "condition": None,
        },
    )

    session.add(transaction)
    session.commit()
    session.refresh(transaction)

    logger.info(
        f"Rental {transaction.id}: book {book.id} to user {renter.id} "
        f"for {payload.rental_duration} months"
    )

    return RentResponse(
        message="Rental transaction created",
        transaction=TransactionRead.model_validate(transaction),
        payment_required=quote.payment_required,
    )
