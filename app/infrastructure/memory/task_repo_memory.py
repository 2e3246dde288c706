"""In-memory task repository (implements ITaskRepository).

Same contract as TaskRepository (SQL). Tasks live in a process-wide dict, so
data is lost on restart; used for DATABASE_BACKEND=memory and unit tests.
"""

from __future__ import annotations

from dataclasses import replace
from functools import lru_cache

from app.application.dtos.task import TaskResult
from app.domain.entities.task import TaskEntity
from app.domain.enums import TaskStatus
from app.domain.exceptions import ResourceNotFoundException
from app.shared.utils.datetime import utc_now
from app.shared.utils.generators import generate_cuid


class InMemoryTaskStore:
    """Task records keyed by id, in insertion order."""

    def __init__(self) -> None:
        self.tasks: dict[str, TaskResult] = {}

    def clear(self) -> None:
        self.tasks.clear()


@lru_cache
def get_memory_store() -> InMemoryTaskStore:
    """Return the process-wide task store (created on first use)."""
    return InMemoryTaskStore()


def _by_priority(tasks: list[TaskResult]) -> list[TaskResult]:
    """Sort priority desc, then created_at desc."""
    return sorted(tasks, key=lambda t: (t.priority, t.created_at), reverse=True)


class InMemoryTaskRepository:
    """Task repository over an InMemoryTaskStore. Same contract as TaskRepository."""

    def __init__(self, store: InMemoryTaskStore) -> None:
        self._store = store

    async def find_all(self) -> list[TaskResult]:
        """Return all tasks, oldest first."""
        return list(self._store.tasks.values())

    async def find_by_id(self, task_id: str) -> TaskResult | None:
        """Return task by ID, or None."""
        return self._store.tasks.get(task_id)

    async def find_by_status(self, status: TaskStatus) -> list[TaskResult]:
        """Return tasks with status, priority desc then created_at desc."""
        return _by_priority([t for t in self._store.tasks.values() if t.status is status])

    async def find_active_ordered_by_priority(self) -> list[TaskResult]:
        """Return non-CANCELLED tasks, priority desc then created_at desc."""
        return _by_priority(
            [t for t in self._store.tasks.values() if t.status.is_active]
        )

    async def count(self) -> int:
        """Return the number of stored tasks."""
        return len(self._store.tasks)

    async def count_by_status(self, status: TaskStatus) -> int:
        """Return the number of tasks with status."""
        return sum(1 for t in self._store.tasks.values() if t.status is status)

    async def save(self, task: TaskEntity, task_id: str | None = None) -> TaskResult:
        """Insert when task_id is None, else overwrite the mutable fields of task_id.

        Raises:
            ResourceNotFoundException: If task_id is given and no such task exists.
        """
        now = utc_now()
        if task_id is None:
            created = TaskResult(
                id=generate_cuid(),
                title=task.title,
                description=task.description,
                status=task.status,
                priority=task.priority,
                created_at=now,
                updated_at=now,
                completed_at=task.completed_at_after_save(None, None, now),
            )
            self._store.tasks[created.id] = created
            return created

        existing = self._store.tasks.get(task_id)
        if existing is None:
            raise ResourceNotFoundException("Task", task_id)
        updated = replace(
            existing,
            title=task.title,
            description=task.description,
            status=task.status,
            priority=task.priority,
            updated_at=now,
            completed_at=task.completed_at_after_save(
                existing.status, existing.completed_at, now
            ),
        )
        self._store.tasks[task_id] = updated
        return updated

    async def exists_by_id(self, task_id: str) -> bool:
        """Return whether a task with task_id exists."""
        return task_id in self._store.tasks

    async def delete_by_id(self, task_id: str) -> None:
        """Delete task by ID (no-op when absent)."""
        self._store.tasks.pop(task_id, None)
