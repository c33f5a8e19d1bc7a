"""Reusable dependencies for FastAPI routes."""
from __future__ import annotations

from fastapi import Depends, HTTPException, Request, Response, status

from app.core.config import get_settings
from app.core.security import SessionSigner
from app.db.store import RecordStore
from app.services.sessions import Session, SessionStore


def get_store(request: Request) -> RecordStore:
    return request.app.state.store


def get_sessions(request: Request) -> SessionStore:
    return request.app.state.sessions


def set_session_cookie(response: Response, session: Session) -> None:
    settings = get_settings()
    response.set_cookie(
        key=settings.session_cookie_name,
        value=SessionSigner().dumps(session.token),
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
        max_age=settings.session_idle_seconds,
    )


def get_session_token(request: Request) -> str | None:
    """Return the verified session token from the cookie, if any.

    Only the signature is checked here; idle expiry is tracked by the session store.
    """

    cookie = request.cookies.get(get_settings().session_cookie_name)
    if not cookie:
        return None
    try:
        return SessionSigner().loads(cookie)
    except ValueError:
        return None


async def get_current_session(
    response: Response,
    token: str | None = Depends(get_session_token),
    sessions: SessionStore = Depends(get_sessions),
) -> Session:
    session = sessions.get(token) if token else None
    if session is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    # Keep the browser cookie alive for as long as the session is in use
    set_session_cookie(response, session)
    return session
