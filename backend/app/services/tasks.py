"""Task service functions scoped to the acting user."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from app.core.errors import NotFoundError, ValidationError
from app.db.store import RecordStore
from app.models.task import Priority, Task
from app.services.sessions import Session

logger = logging.getLogger(__name__)

VALID_PRIORITIES = {priority.value for priority in Priority}
UPDATABLE_FIELDS = ("title", "description", "priority", "done")


def _check_priority(priority: str) -> None:
    if priority not in VALID_PRIORITIES:
        raise ValidationError("invalid priority")


def _find_owned(tasks: list[Task], session: Session, task_id: str) -> int:
    for index, task in enumerate(tasks):
        if task.id == task_id and task.user_id == session.user_id:
            return index
    raise NotFoundError("task not found")


async def list_tasks(store: RecordStore, session: Session) -> list[Task]:
    tasks = await store.load_tasks()
    return [task for task in tasks if task.user_id == session.user_id]


async def create_task(
    store: RecordStore,
    session: Session,
    title: str | None,
    description: str | None = None,
    priority: str | None = None,
) -> Task:
    if not title:
        raise ValidationError("title is required")
    if priority is None:
        priority = Priority.LOW.value
    _check_priority(priority)

    now = datetime.now(timezone.utc)
    task = Task(
        user_id=session.user_id,
        title=title,
        description=description or "",
        priority=priority,
        created_at=now,
        updated_at=now,
    )
    tasks = await store.load_tasks()
    tasks.append(task)
    await store.save_tasks(tasks)
    logger.info("User %s created task %s", session.user_id, task.id)
    return task


async def update_task(store: RecordStore, session: Session, task_id: str, fields: dict[str, Any]) -> Task:
    """Apply a partial update; absent or null fields keep their current value."""

    tasks = await store.load_tasks()
    index = _find_owned(tasks, session, task_id)

    changes = {key: fields[key] for key in UPDATABLE_FIELDS if fields.get(key) is not None}
    if "priority" in changes:
        _check_priority(changes["priority"])
    if "title" in changes and not changes["title"]:
        raise ValidationError("title is required")

    changes["updated_at"] = datetime.now(timezone.utc)
    updated = tasks[index].model_copy(update=changes)
    tasks[index] = updated
    await store.save_tasks(tasks)
    logger.info("User %s updated task %s", session.user_id, task_id)
    return updated


async def delete_task(store: RecordStore, session: Session, task_id: str) -> Task:
    tasks = await store.load_tasks()
    index = _find_owned(tasks, session, task_id)
    removed = tasks.pop(index)
    await store.save_tasks(tasks)
    logger.info("User %s deleted task %s", session.user_id, task_id)
    return removed
