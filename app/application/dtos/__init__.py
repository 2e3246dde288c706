"""Application DTOs (no ORM dependency)."""

from app.application.dtos.task import TaskResult, TaskStatistics

__all__ = ["TaskResult", "TaskStatistics"]
