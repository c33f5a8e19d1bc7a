"""Security helpers for password hashing and session cookie signing."""
from __future__ import annotations

from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer
from passlib.context import CryptContext

from .config import get_settings


_password_context = CryptContext(schemes=["argon2"], deprecated="auto")


class PasswordHasher:
    """Hash and verify user passwords using Argon2id."""

    @staticmethod
    def hash(password: str) -> str:
        return _password_context.hash(password)

    @staticmethod
    def verify(password: str, hashed: str) -> bool:
        return _password_context.verify(password, hashed)

    @staticmethod
    def dummy_verify() -> None:
        """Spend the same time as a real verify when there is no user to check."""
        _password_context.dummy_verify()


class SessionSigner:
    """Sign and unsign session tokens stored in the client cookie."""

    def __init__(self, salt: str = "taskboard-session") -> None:
        settings = get_settings()
        self._serializer = URLSafeTimedSerializer(settings.secret_key, salt=salt)

    def dumps(self, token: str) -> str:
        return self._serializer.dumps(token)

    def loads(self, cookie: str, max_age: int | None = None) -> str:
        try:
            return self._serializer.loads(cookie, max_age=max_age)
        except (BadSignature, SignatureExpired) as exc:
            raise ValueError("Invalid or expired session cookie") from exc
