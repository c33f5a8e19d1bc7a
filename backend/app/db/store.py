"""JSON file record store for users and tasks."""
from __future__ import annotations

import asyncio
import logging
import os
import tempfile
from pathlib import Path
from typing import Sequence

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from app.core.errors import StorageError
from app.models.task import Task
from app.models.user import User

logger = logging.getLogger(__name__)

USERS_FILE = "users.json"
TASKS_FILE = "tasks.json"

_users_adapter = TypeAdapter(list[User])
_tasks_adapter = TypeAdapter(list[Task])


class RecordStore:
    """Whole-collection read/write over two JSON documents.

    Every save rewrites the full collection. There is no locking: two requests
    doing read-modify-write at the same time race and the later save wins.
    """

    def __init__(self, data_dir: str | Path) -> None:
        self._data_dir = Path(data_dir)
        self.users_path = self._data_dir / USERS_FILE
        self.tasks_path = self._data_dir / TASKS_FILE
        self._ensure_files()
        logger.info("Record store ready at %s", self._data_dir)

    def _ensure_files(self) -> None:
        self._data_dir.mkdir(parents=True, exist_ok=True)
        for path in (self.users_path, self.tasks_path):
            if not path.exists():
                path.write_text("[]", encoding="utf-8")

    async def load_users(self) -> list[User]:
        return await asyncio.to_thread(self._read, self.users_path, _users_adapter)

    async def save_users(self, users: Sequence[User]) -> None:
        await asyncio.to_thread(self._write, self.users_path, _users_adapter, list(users))

    async def load_tasks(self) -> list[Task]:
        return await asyncio.to_thread(self._read, self.tasks_path, _tasks_adapter)

    async def save_tasks(self, tasks: Sequence[Task]) -> None:
        await asyncio.to_thread(self._write, self.tasks_path, _tasks_adapter, list(tasks))

    @staticmethod
    def _read(path: Path, adapter: TypeAdapter) -> list:
        try:
            content = path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.error("Failed to read %s: %s", path, exc)
            raise StorageError(f"could not read {path.name}") from exc
        if not content.strip():
            return []
        try:
            return adapter.validate_json(content)
        except PydanticValidationError as exc:
            logger.error("Corrupt record file %s: %s", path, exc)
            raise StorageError(f"corrupt data in {path.name}") from exc

    @staticmethod
    def _write(path: Path, adapter: TypeAdapter, records: list) -> None:
        payload = adapter.dump_json(records, by_alias=True, indent=2)
        # Write to a sibling file and swap it in so readers never see a partial document.
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(payload)
            os.replace(tmp_name, path)
        except OSError as exc:
            logger.error("Failed to write %s: %s", path, exc)
            Path(tmp_name).unlink(missing_ok=True)
            raise StorageError(f"could not write {path.name}") from exc
