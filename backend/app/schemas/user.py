"""Pydantic schemas for user output."""
from __future__ import annotations

from pydantic import BaseModel


class UserPublic(BaseModel):
    """User fields safe to return to clients."""

    id: str
    username: str
