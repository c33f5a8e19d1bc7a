# tests/helpers.py

from __future__ import annotations

from datetime import timedelta

from fastapi.testclient import TestClient

from app.services.sessions import SessionStore


def signup(client: TestClient, username: str = "alice", password: str = "secret1") -> dict:
    response = client.post("/signup", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["user"]


def switch_user(client: TestClient, username: str, password: str = "secret1") -> dict:
    """Drop the current cookie and sign in (or up) as another user."""
    client.cookies.clear()
    response = client.post("/login", json={"username": username, "password": password})
    if response.status_code == 401:
        return signup(client, username, password)
    assert response.status_code == 200, response.text
    return response.json()["user"]


def age_sessions(sessions: SessionStore, delta: timedelta) -> None:
    """Pretend every live session was last used ``delta`` earlier."""
    for session in sessions._sessions.values():
        session.created_at -= delta
        session.last_seen -= delta
