"""Application layer: interfaces and services.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (SQL and in-memory task stores).
"""

from app.application.interfaces import ITaskRepository
from app.application.services.task_service import TaskService

__all__ = ["ITaskRepository", "TaskService"]
