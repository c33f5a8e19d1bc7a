# tests/test_sessions.py

from __future__ import annotations

from datetime import timedelta

from app.services.sessions import SessionStore


def test_create_and_get() -> None:
    store = SessionStore(idle_seconds=60)
    session = store.create("u1", "alice")

    found = store.get(session.token)
    assert found is session
    assert found.user_id == "u1"
    assert found.username == "alice"


def test_tokens_are_unique() -> None:
    store = SessionStore(idle_seconds=60)
    assert store.create("u1", "alice").token != store.create("u1", "alice").token
    assert len(store) == 2


def test_unknown_token_returns_none() -> None:
    assert SessionStore(idle_seconds=60).get("nope") is None


def test_idle_session_expires_and_is_evicted() -> None:
    store = SessionStore(idle_seconds=60)
    session = store.create("u1", "alice")
    session.last_seen -= timedelta(seconds=120)

    assert store.get(session.token) is None
    assert len(store) == 0


def test_lookup_refreshes_idle_window() -> None:
    store = SessionStore(idle_seconds=60)
    session = store.create("u1", "alice")
    session.last_seen -= timedelta(seconds=50)
    stale = session.last_seen

    assert store.get(session.token) is not None
    assert session.last_seen > stale


def test_destroy_is_idempotent() -> None:
    store = SessionStore(idle_seconds=60)
    session = store.create("u1", "alice")

    store.destroy(session.token)
    store.destroy(session.token)
    assert store.get(session.token) is None


def test_create_sweeps_idle_sessions() -> None:
    store = SessionStore(idle_seconds=60)
    abandoned = [store.create(f"u{i}", "someone") for i in range(1000)]
    for session in abandoned:
        session.last_seen -= timedelta(seconds=3600)

    fresh = store.create("u-new", "newcomer")

    assert len(store) == 1
    assert store.get(fresh.token) is fresh


def test_create_keeps_active_sessions() -> None:
    store = SessionStore(idle_seconds=60)
    active = store.create("u1", "alice")
    stale = store.create("u2", "bob")
    stale.last_seen -= timedelta(seconds=120)

    store.create("u3", "carol")

    assert len(store) == 2
    assert store.get(active.token) is active
