"""Task repository (SQLAlchemy). Implements ITaskRepository."""

from __future__ import annotations

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.task import TaskResult
from app.domain.entities.task import TaskEntity
from app.domain.enums import TaskStatus
from app.domain.exceptions import ResourceNotFoundException
from app.infrastructure.persistence.models.task import Task
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.shared.utils.datetime import ensure_utc, utc_now

# Priority first, most recent first among equal priorities.
_PRIORITY_ORDER = (Task.priority.desc(), Task.created_at.desc())


def _to_result(t: Task) -> TaskResult:
    """Map Task ORM to TaskResult DTO."""
    return TaskResult(
        id=t.id,
        title=t.title,
        description=t.description,
        status=TaskStatus(t.status),
        priority=t.priority,
        created_at=ensure_utc(t.created_at),
        updated_at=ensure_utc(t.updated_at),
        completed_at=ensure_utc(t.completed_at),
    )


class TaskRepository(BaseRepository[Task]):
    """Task repository. Implements ITaskRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Task)

    async def find_all(self) -> list[TaskResult]:
        """Return all tasks, oldest first."""
        rows = await self.get_all(Task.created_at.asc(), Task.id.asc())
        return [_to_result(t) for t in rows]

    async def find_by_id(self, task_id: str) -> TaskResult | None:
        """Return task by ID, or None."""
        task = await self.get_by_id(task_id)
        return _to_result(task) if task else None

    async def find_by_status(self, status: TaskStatus) -> list[TaskResult]:
        """Return tasks with status, priority desc then created_at desc."""
        rows = await self._select(Task.status == status.value)
        return [_to_result(t) for t in rows]

    async def find_active_ordered_by_priority(self) -> list[TaskResult]:
        """Return non-CANCELLED tasks, priority desc then created_at desc."""
        rows = await self._select(Task.status != TaskStatus.CANCELLED.value)
        return [_to_result(t) for t in rows]

    async def count(self) -> int:
        """Return the number of stored tasks."""
        return await self.count_where()

    async def count_by_status(self, status: TaskStatus) -> int:
        """Return the number of tasks with status."""
        return await self.count_where(Task.status == status.value)

    async def save(self, task: TaskEntity, task_id: str | None = None) -> TaskResult:
        """Insert when task_id is None, else overwrite the mutable fields of task_id.

        Raises:
            ResourceNotFoundException: If task_id is given and no such row exists.
        """
        now = utc_now()
        if task_id is None:
            row = Task(
                title=task.title,
                description=task.description,
                status=task.status.value,
                priority=task.priority,
                completed_at=task.completed_at_after_save(None, None, now),
            )
            return _to_result(await self.create(row))

        row = await self.get_by_id(task_id)
        if row is None:
            raise ResourceNotFoundException("Task", task_id)
        row.completed_at = task.completed_at_after_save(
            TaskStatus(row.status), ensure_utc(row.completed_at), now
        )
        row.title = task.title
        row.description = task.description
        row.status = task.status.value
        row.priority = task.priority
        row.updated_at = now
        return _to_result(await self.update(row))

    async def exists_by_id(self, task_id: str) -> bool:
        """Return whether a task with task_id exists."""
        return await self.exists(task_id)

    async def delete_by_id(self, task_id: str) -> None:
        """Delete task by ID (no-op when absent)."""
        row = await self.get_by_id(task_id)
        if row is not None:
            await self.delete(row)

    async def _select(self, *criteria: Any) -> list[Task]:
        result = await self.db.execute(
            select(Task).where(*criteria).order_by(*_PRIORITY_ORDER)
        )
        return list(result.scalars().all())
