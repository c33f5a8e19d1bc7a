"""Error types raised by services and mapped to HTTP responses."""
from __future__ import annotations

from fastapi import status


class TaskboardError(Exception):
    """Base class for errors that carry an HTTP status code."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(TaskboardError):
    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(TaskboardError):
    status_code = status.HTTP_409_CONFLICT


class AuthError(TaskboardError):
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(TaskboardError):
    """Task is absent or owned by someone else; callers cannot tell which."""

    status_code = status.HTTP_404_NOT_FOUND


class StorageError(TaskboardError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class InternalError(TaskboardError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
