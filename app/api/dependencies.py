"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the task store and TaskService.
Routes depend only on these dependencies, not on infra directly.

When database_backend is 'sql', the task store is the SQLAlchemy repository
on a request-scoped session. When database_backend is 'memory', it is the
process-wide in-memory store. Switch backends via DATABASE_BACKEND in config.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces.repositories import ITaskRepository
from app.application.services.task_service import TaskService
from app.core.config import get_settings
from app.infrastructure.memory import InMemoryTaskRepository, get_memory_store
from app.infrastructure.persistence.database import get_db, get_db_transactional
from app.infrastructure.persistence.repositories import TaskRepository


@dataclass
class DbOrMemory:
    """Either a SQL session or None (memory backend), from config."""

    db: AsyncSession | None


async def _get_db_or_memory_read() -> AsyncGenerator[DbOrMemory, None]:
    """Yield DB session (read) or nothing for the memory backend."""
    settings = get_settings()
    if settings.database_backend == "sql":
        async for session in get_db():
            yield DbOrMemory(db=session)
    else:
        yield DbOrMemory(db=None)


async def _get_db_or_memory_write() -> AsyncGenerator[DbOrMemory, None]:
    """Yield DB session (transactional) or nothing for the memory backend."""
    settings = get_settings()
    if settings.database_backend == "sql":
        async for session in get_db_transactional():
            yield DbOrMemory(db=session)
    else:
        yield DbOrMemory(db=None)


def _task_repo(backend: DbOrMemory) -> ITaskRepository:
    if backend.db is not None:
        return TaskRepository(backend.db)
    return InMemoryTaskRepository(get_memory_store())


async def get_task_service(
    backend: Annotated[DbOrMemory, Depends(_get_db_or_memory_read)],
) -> TaskService:
    """TaskService for read endpoints (no commit)."""
    return TaskService(_task_repo(backend))


async def get_task_service_for_write(
    backend: Annotated[DbOrMemory, Depends(_get_db_or_memory_write)],
) -> TaskService:
    """TaskService for POST/PUT/DELETE (commits on success, rolls back on error)."""
    return TaskService(_task_repo(backend))
