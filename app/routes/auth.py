import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from app.database import get_session
from app.dependencies.auth import get_password_hasher, get_token_service
from app.models.user import User
from app.schemas.user_schemas import (
    UserRegister, UserLogin, RegisterResponse, LoginResponse, UserSummary, LoginUser
)
from app.utils.errors import handle_errors
from app.utils.hash import PasswordHasher
from app.utils.token import TokenService

logger = logging.getLogger(__name__)

router = APIRouter()

INVALID_CREDENTIALS = "Invalid credentials"
EMAIL_TAKEN = "User already exists with this email"


def find_user_by_email(session: Session, email: str) -> Optional[User]:
    return session.exec(select(User).where(User.email == email)).first()


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
@handle_errors("Registration failed")
def register_user(
    payload: UserRegister,
    session: Session = Depends(get_session),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
):
    if find_user_by_email(session, payload.email):
        raise HTTPException(400, EMAIL_TAKEN)

    user = User(
        **payload.model_dump(exclude={"password"}),
        password=hasher.hash(payload.password),
    )

    session.add(user)
    try:
        session.commit()
    except IntegrityError:
        # a concurrent registration won the unique email index
        session.rollback()
        raise HTTPException(400, EMAIL_TAKEN)
    session.refresh(user)

    logger.info(f"Registered user {user.id}")

    return RegisterResponse(
        message="Registration successful",
        token=tokens.issue(user.id, user.email),
        user=UserSummary.model_validate(user),
    )


@router.post("/login", response_model=LoginResponse)
@handle_errors("Login failed")
def login(
    payload: UserLogin,
    session: Session = Depends(get_session),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
):
    user = find_user_by_email(session, payload.email)

    # same response and same bcrypt cost for unknown email and wrong password
    if not user:
        hasher.dummy_verify()
        raise HTTPException(401, INVALID_CREDENTIALS)

    if not hasher.verify(payload.password, user.password):
        raise HTTPException(401, INVALID_CREDENTIALS)

    return LoginResponse(
        message="Login successful",
        token=tokens.issue(user.id, user.email),
        user=LoginUser.model_validate(user),
    )
