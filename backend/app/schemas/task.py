"""Pydantic schemas for task requests and responses."""
from __future__ import annotations

from pydantic import BaseModel, StrictBool

from app.models.task import Task


class TaskCreate(BaseModel):
    title: str | None = None
    description: str | None = None
    priority: str | None = None


class TaskUpdate(BaseModel):
    title: str | None = None
    description: str | None = None
    priority: str | None = None
    done: StrictBool | None = None


class TaskDeleted(BaseModel):
    message: str
    task: Task
