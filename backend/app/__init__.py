"""Taskboard backend application."""
