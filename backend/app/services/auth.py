"""User registration, credential checks, and session lifecycle."""
from __future__ import annotations

import logging

from app.core.errors import AuthError, ConflictError, InternalError, ValidationError
from app.core.security import PasswordHasher
from app.db.store import RecordStore
from app.models.user import User
from app.services.sessions import Session, SessionStore, SessionStoreError

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "invalid credentials"


def _require_credentials(username: str | None, password: str | None) -> None:
    if not username or not password:
        raise ValidationError("username and password required")


def _find_user(users: list[User], username: str) -> User | None:
    normalized = username.lower()
    for user in users:
        if user.username.lower() == normalized:
            return user
    return None


async def signup(store: RecordStore, sessions: SessionStore, username: str | None, password: str | None) -> Session:
    _require_credentials(username, password)

    users = await store.load_users()
    if _find_user(users, username):
        raise ConflictError("username already taken")

    user = User(username=username, password_hash=PasswordHasher.hash(password))
    users.append(user)
    await store.save_users(users)
    logger.info("Registered user %s", user.id)

    return sessions.create(user.id, user.username)


async def login(store: RecordStore, sessions: SessionStore, username: str | None, password: str | None) -> Session:
    _require_credentials(username, password)

    users = await store.load_users()
    user = _find_user(users, username)
    if not user:
        PasswordHasher.dummy_verify()
        logger.info("Login failed: unknown username")
        raise AuthError(INVALID_CREDENTIALS)
    if not PasswordHasher.verify(password, user.password_hash):
        logger.info("Login failed for user %s: wrong password", user.id)
        raise AuthError(INVALID_CREDENTIALS)

    return sessions.create(user.id, user.username)


def logout(sessions: SessionStore, token: str | None) -> None:
    if token is None:
        return
    try:
        sessions.destroy(token)
    except SessionStoreError as exc:
        logger.error("Could not destroy session: %s", exc)
        raise InternalError("could not logout") from exc
