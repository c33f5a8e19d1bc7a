"""Persisted record models."""
from .task import Priority, Task
from .user import User

__all__ = ["User", "Task", "Priority"]
