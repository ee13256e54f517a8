import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import Settings, get_settings
from app.database import build_engine, create_db_and_tables
from app.routes import (
    auth,
    books,
    health,
    premium,
    review,
    transactions,
    users,
)
from app.utils.hash import PasswordHasher
from app.utils.token import TokenService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Run DB creation ONLY in local; other environments use alembic
    if app.state.settings.env == "local":
        create_db_and_tables(app.state.engine)
    yield
    app.state.engine.dispose()


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    first = exc.errors()[0] if exc.errors() else {}
    field = ".".join(str(part) for part in first.get("loc", ())[1:]) or "request"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": f"Invalid request: {field}: {first.get('msg', 'invalid value')}"},
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    logging.basicConfig(level=settings.log_level)
    if settings.uses_default_secret and settings.env != "local":
        logger.warning("JWT secret is the development fallback; set JWT_SECRET")

    app = FastAPI(title="VidyaShare API", lifespan=lifespan)

    app.state.settings = settings
    app.state.engine = build_engine(settings.database_url)
    app.state.password_hasher = PasswordHasher(rounds=settings.bcrypt_rounds)
    app.state.token_service = TokenService(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expire_days=settings.token_expire_days,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(health.router, prefix="/api", tags=["Health"])
    app.include_router(auth.router, prefix="/api/auth", tags=["Authentication"])
    app.include_router(books.router, prefix="/api/books", tags=["Books"])
    app.include_router(transactions.router, prefix="/api/transactions", tags=["Transactions"])
    app.include_router(review.router, prefix="/api/reviews", tags=["Reviews"])
    app.include_router(premium.router, prefix="/api/premium", tags=["Premium"])
    app.include_router(users.router, prefix="/api/users", tags=["Users"])

    return app


app = create_app()
