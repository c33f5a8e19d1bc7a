"""Task endpoints for the signed-in user."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status

from app.core.dependencies import get_current_session, get_store
from app.db.store import RecordStore
from app.models.task import Task
from app.schemas.task import TaskCreate, TaskDeleted, TaskUpdate
from app.services import tasks as task_service
from app.services.sessions import Session

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("", response_model=list[Task])
async def list_tasks(
    store: RecordStore = Depends(get_store),
    session: Session = Depends(get_current_session),
) -> list[Task]:
    return await task_service.list_tasks(store, session)


@router.post("", response_model=Task, status_code=status.HTTP_201_CREATED)
async def create_task(
    payload: TaskCreate,
    store: RecordStore = Depends(get_store),
    session: Session = Depends(get_current_session),
) -> Task:
    return await task_service.create_task(
        store, session, payload.title, payload.description, payload.priority
    )


@router.put("/{task_id}", response_model=Task)
async def update_task(
    task_id: str,
    payload: TaskUpdate,
    store: RecordStore = Depends(get_store),
    session: Session = Depends(get_current_session),
) -> Task:
    return await task_service.update_task(store, session, task_id, payload.model_dump(exclude_unset=True))


@router.delete("/{task_id}", response_model=TaskDeleted)
async def delete_task(
    task_id: str,
    store: RecordStore = Depends(get_store),
    session: Session = Depends(get_current_session),
) -> TaskDeleted:
    removed = await task_service.delete_task(store, session, task_id)
    return TaskDeleted(message="deleted", task=removed)
