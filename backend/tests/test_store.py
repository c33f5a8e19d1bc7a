# tests/test_store.py

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import pytest

from app.core.errors import StorageError
from app.db.store import RecordStore
from app.models.task import Task
from app.models.user import User


def test_missing_files_are_initialized_empty(tmp_path: Path) -> None:
    store = RecordStore(tmp_path / "fresh")

    assert json.loads(store.users_path.read_text()) == []
    assert json.loads(store.tasks_path.read_text()) == []
    assert asyncio.run(store.load_users()) == []
    assert asyncio.run(store.load_tasks()) == []


def test_existing_files_are_not_reset(tmp_path: Path) -> None:
    store = RecordStore(tmp_path)
    asyncio.run(store.save_tasks([Task(user_id="u1", title="keep me")]))

    reopened = RecordStore(tmp_path)
    tasks = asyncio.run(reopened.load_tasks())
    assert [t.title for t in tasks] == ["keep me"]


def test_empty_file_reads_as_empty_collection(store: RecordStore) -> None:
    store.users_path.write_text("")
    assert asyncio.run(store.load_users()) == []


def test_saved_records_use_camel_case_keys(store: RecordStore) -> None:
    task = Task(user_id="u1", title="Write report", priority="High")
    asyncio.run(store.save_tasks([task]))

    raw = json.loads(store.tasks_path.read_text())
    assert raw[0]["userId"] == "u1"
    assert raw[0]["priority"] == "High"
    assert {"createdAt", "updatedAt", "done", "description"} <= raw[0].keys()

    loaded = asyncio.run(store.load_tasks())
    assert loaded[0].id == task.id
    assert loaded[0].user_id == "u1"


def test_user_password_hash_is_persisted(store: RecordStore) -> None:
    asyncio.run(store.save_users([User(username="alice", password_hash="$argon2id$x")]))
    raw = json.loads(store.users_path.read_text())
    assert raw[0]["passwordHash"] == "$argon2id$x"


def test_corrupt_file_raises_and_is_left_untouched(store: RecordStore) -> None:
    store.tasks_path.write_text("{not json")

    with pytest.raises(StorageError):
        asyncio.run(store.load_tasks())
    assert store.tasks_path.read_text() == "{not json"


def test_records_with_wrong_shape_raise(store: RecordStore) -> None:
    store.users_path.write_text(json.dumps([{"id": "1"}]))

    with pytest.raises(StorageError):
        asyncio.run(store.load_users())


def test_save_replaces_whole_collection(store: RecordStore) -> None:
    asyncio.run(store.save_tasks([Task(user_id="u1", title="a"), Task(user_id="u1", title="b")]))
    asyncio.run(store.save_tasks([Task(user_id="u1", title="c")]))

    assert [t.title for t in asyncio.run(store.load_tasks())] == ["c"]
    leftovers = [p.name for p in store.tasks_path.parent.iterdir() if p.name.endswith(".tmp")]
    assert leftovers == []
