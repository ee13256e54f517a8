from passlib.context import CryptContext


class PasswordHasher:
    """Salted bcrypt hashing. `rounds` is the bcrypt cost factor."""

    def __init__(self, rounds: int = 10):
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return self._context.verify(password, password_hash)
        except (ValueError, TypeError):
            # unrecognised or corrupt digest counts as a mismatch
            return False

    def dummy_verify(self) -> bool:
        # spends the same bcrypt time as verify() when there is no digest to check
        return self._context.dummy_verify()
