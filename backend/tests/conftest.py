# tests/conftest.py

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app.core.config import get_settings
from app.db.store import RecordStore
from app.main import create_app
from app.services.sessions import SessionStore


@pytest.fixture(autouse=True)
def settings_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Point settings at a per-test data directory."""
    monkeypatch.setenv("TASKBOARD_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("TASKBOARD_SECRET_KEY", "test-secret")
    monkeypatch.delenv("TASKBOARD_STATIC_DIR", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def store(tmp_path: Path) -> RecordStore:
    return RecordStore(tmp_path / "data")


@pytest.fixture()
def sessions() -> SessionStore:
    return SessionStore(idle_seconds=60 * 60)


@pytest.fixture()
def client() -> Iterator[TestClient]:
    with TestClient(create_app()) as test_client:
        yield test_client
