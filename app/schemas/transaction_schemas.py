from pydantic import Field
from typing import Optional

from app.models.transaction import TransactionType, TransactionStatus
from app.schemas.base import CamelModel, UtcDatetime


class RentRequest(CamelModel):
    book_id: int
    rental_duration: int = Field(..., ge=1)  # months


class PaymentDetails(CamelModel):
    method: Optional[str] = None
    transaction_id: Optional[str] = None
    paid_at: Optional[UtcDatetime] = None


class RentalWindow(CamelModel):
    start_date: UtcDatetime
    end_date: UtcDatetime
    return_date: Optional[UtcDatetime] = None
    condition: Optional[str] = None


class TransactionRead(CamelModel):
    id: int
    book_id: int
    seller_id: int
    buyer_id: int
    transaction_type: TransactionType
    amount: float
    advance_amount: Optional[float] = None
    monthly_rental: Optional[float] = None
    rental_duration: Optional[int] = None
    status: TransactionStatus
    payment_details: Optional[PaymentDetails] = None
    rental: Optional[RentalWindow] = None
    created_at: UtcDatetime
    updated_at: UtcDatetime


class RentResponse(CamelModel):
    message: str
    transaction: TransactionRead
    payment_required: float
