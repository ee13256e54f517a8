from jose import jwt, JWTError
from datetime import datetime, timedelta, timezone
from typing import NamedTuple


class InvalidTokenError(Exception):
    """Token is malformed, expired or carries a bad signature."""


class TokenClaims(NamedTuple):
    id: int
    email: str


class TokenService:
    def __init__(self, secret: str, algorithm: str = "HS256", expire_days: int = 7):
        self.secret = secret
        self.algorithm = algorithm
        self.expires_delta = timedelta(days=expire_days)

    def issue(self, user_id: int, email: str) -> str:
        to_encode = {
            "id": user_id,
            "email": email,
            "exp": datetime.now(timezone.utc) + self.expires_delta,
        }
        return jwt.encode(to_encode, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
            )
        except JWTError as exc:
            raise InvalidTokenError(str(exc)) from exc

        user_id = payload.get("id")
        if user_id is None:
            raise InvalidTokenError("Invalid token payload")

        try:
            return TokenClaims(id=int(user_id), email=payload.get("email", ""))
        except (TypeError, ValueError) as exc:
            raise InvalidTokenError("Invalid token payload") from exc
