"""Authentication-related schemas."""
from __future__ import annotations

from pydantic import BaseModel

from app.schemas.user import UserPublic


class Credentials(BaseModel):
    username: str | None = None
    password: str | None = None


class AuthResponse(BaseModel):
    message: str
    user: UserPublic


class MessageResponse(BaseModel):
    message: str
