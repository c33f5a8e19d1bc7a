"""Authentication endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from app.core.config import get_settings
from app.core.dependencies import get_session_token, get_sessions, get_store, set_session_cookie
from app.db.store import RecordStore
from app.schemas.auth import AuthResponse, Credentials, MessageResponse
from app.schemas.user import UserPublic
from app.services import auth as auth_service
from app.services.sessions import Session, SessionStore

router = APIRouter(tags=["auth"])


def _auth_response(message: str, session: Session) -> AuthResponse:
    return AuthResponse(message=message, user=UserPublic(id=session.user_id, username=session.username))


@router.post("/signup", response_model=AuthResponse)
async def signup(
    payload: Credentials,
    response: Response,
    store: RecordStore = Depends(get_store),
    sessions: SessionStore = Depends(get_sessions),
) -> AuthResponse:
    session = await auth_service.signup(store, sessions, payload.username, payload.password)
    set_session_cookie(response, session)
    return _auth_response("signup successful", session)


@router.post("/login", response_model=AuthResponse)
async def login(
    payload: Credentials,
    response: Response,
    store: RecordStore = Depends(get_store),
    sessions: SessionStore = Depends(get_sessions),
) -> AuthResponse:
    session = await auth_service.login(store, sessions, payload.username, payload.password)
    set_session_cookie(response, session)
    return _auth_response("login successful", session)


@router.post("/logout", response_model=MessageResponse)
async def logout(
    response: Response,
    token: str | None = Depends(get_session_token),
    sessions: SessionStore = Depends(get_sessions),
) -> MessageResponse:
    auth_service.logout(sessions, token)
    response.delete_cookie(get_settings().session_cookie_name)
    return MessageResponse(message="logout successful")
