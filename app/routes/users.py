from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import func
from sqlmodel import Session, select

from app.database import get_session
from app.dependencies.auth import get_current_user
from app.models.book import Book
from app.models.transaction import Transaction, TransactionType, TransactionStatus
from app.models.user import User
from app.schemas.user_schemas import (
    ProfileUpdate, ProfileResponse, ProfileStats, ProfileUpdateResponse, UserRead
)
from app.utils.errors import handle_errors
from app.utils.token import TokenClaims

router = APIRouter()


# -------- USER PROFILE --------

@router.get("/profile", response_model=ProfileResponse)
@handle_errors("Failed to fetch profile")
def get_my_profile(
    session: Session = Depends(get_session),
    current_user: TokenClaims = Depends(get_current_user),
):
    user = session.get(User, current_user.id)
    if not user:
        raise HTTPException(404, "User not found")

    books_listed = session.exec(
        select(func.count()).select_from(Book).where(Book.owner_id == user.id)
    ).one()

    books_rented = session.exec(
        select(func.count()).select_from(Transaction).where(
            Transaction.buyer_id == user.id,
            Transaction.transaction_type == TransactionType.rent,
        )
    ).one()

    total_earned = session.exec(
        select(func.coalesce(func.sum(Transaction.amount), 0)).where(
            Transaction.seller_id == user.id,
            Transaction.status == TransactionStatus.completed,
        )
    ).one()

    return ProfileResponse(
        user=UserRead.model_validate(user),
        stats=ProfileStats(
            books_listed=books_listed,
            books_rented=books_rented,
            total_earned=total_earned,
            rating=user.rating,
        ),
    )


@router.put("/profile", response_model=ProfileUpdateResponse)
@handle_errors("Failed to update profile")
def update_user_profile(
    payload: ProfileUpdate,
    session: Session = Depends(get_session),
    current_user: TokenClaims = Depends(get_current_user),
):
    user = session.get(User, current_user.id)
    if not user:
        raise HTTPException(404, "User not found")

    for key, value in payload.model_dump(exclude_none=True).items():
        setattr(user, key, value)

    session.add(user)
    session.commit()
    session.refresh(user)

    return ProfileUpdateResponse(message="Profile updated successfully", user=UserRead.model_validate(user))
