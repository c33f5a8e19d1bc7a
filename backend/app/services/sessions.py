"""Server-side session store keyed by opaque tokens."""
from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

logger = logging.getLogger(__name__)


class SessionStoreError(Exception):
    """Raised when the session backend cannot complete an operation."""


@dataclass
class Session:
    """Identity of the acting user bound to a session token."""

    token: str
    user_id: str
    username: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    last_seen: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class SessionStore:
    """In-memory session store with a rolling idle expiry."""

    def __init__(self, idle_seconds: int) -> None:
        self._idle = timedelta(seconds=idle_seconds)
        self._sessions: dict[str, Session] = {}

    def create(self, user_id: str, username: str) -> Session:
        self._evict_expired(datetime.now(timezone.utc))
        session = Session(token=secrets.token_urlsafe(32), user_id=user_id, username=username)
        self._sessions[session.token] = session
        return session

    def get(self, token: str) -> Session | None:
        session = self._sessions.get(token)
        if session is None:
            return None
        now = datetime.now(timezone.utc)
        if now - session.last_seen > self._idle:
            logger.debug("Session for user %s expired after idle window", session.user_id)
            del self._sessions[token]
            return None
        session.last_seen = now
        return session

    def _evict_expired(self, now: datetime) -> None:
        expired = [token for token, session in self._sessions.items() if now - session.last_seen > self._idle]
        for token in expired:
            del self._sessions[token]
        if expired:
            logger.debug("Evicted %d idle session(s)", len(expired))

    def destroy(self, token: str) -> None:
        self._sessions.pop(token, None)

    def __len__(self) -> int:
        return len(self._sessions)
