"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.task_repo import TaskRepository

__all__ = [
    "BaseRepository",
    "TaskRepository",
]
