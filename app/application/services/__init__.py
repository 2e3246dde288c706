"""Application services: task orchestration and statistics."""

from app.application.services.task_service import TaskService

__all__ = ["TaskService"]
