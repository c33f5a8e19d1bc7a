"""Durable storage for user and task records."""
