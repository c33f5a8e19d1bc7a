"""Service layer for authentication, sessions, and tasks."""
