"""Route modules for the Taskboard API."""
from . import auth, tasks

__all__ = ["auth", "tasks"]
