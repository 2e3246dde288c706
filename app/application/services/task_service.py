"""Task application service: CRUD orchestration and status statistics."""

from __future__ import annotations

import logging

from app.application.dtos.task import TaskResult, TaskStatistics
from app.application.interfaces.repositories import ITaskRepository
from app.domain.entities.task import TaskEntity
from app.domain.enums import TaskStatus

logger = logging.getLogger(__name__)


class TaskService:
    """Orchestrates the task store.

    Not-found is reported as None (lookups, update) or False (delete), never
    raised. Storage faults propagate to the caller.
    """

    def __init__(self, task_repo: ITaskRepository) -> None:
        self._task_repo = task_repo

    async def find_all(self) -> list[TaskResult]:
        return await self._task_repo.find_all()

    async def find_by_id(self, task_id: str) -> TaskResult | None:
        return await self._task_repo.find_by_id(task_id)

    async def find_by_status(self, status: TaskStatus) -> list[TaskResult]:
        return await self._task_repo.find_by_status(status)

    async def find_active_tasks_ordered_by_priority(self) -> list[TaskResult]:
        return await self._task_repo.find_active_ordered_by_priority()

    async def save(self, task: TaskEntity) -> TaskResult:
        """Validate and persist a new task.

        Raises:
            ValidationException: If the title is blank or a field is out of range.
        """
        task.validate()
        created = await self._task_repo.save(task)
        logger.info("Created task %s (status=%s)", created.id, created.status.value)
        return created

    async def update(self, task_id: str, task: TaskEntity) -> TaskResult | None:
        """Replace title, description, status and priority of an existing task.

        Full replace, not merge: every mutable field is taken from task, even
        when it holds its default. id and created_at are left untouched.

        Returns:
            The updated task, or None when task_id does not exist.
        """
        existing = await self._task_repo.find_by_id(task_id)
        if existing is None:
            return None
        task.validate()
        updated = await self._task_repo.save(task, task_id=task_id)
        if existing.status is not updated.status:
            logger.info(
                "Task %s status %s -> %s",
                task_id,
                existing.status.value,
                updated.status.value,
            )
        else:
            logger.info("Updated task %s", task_id)
        return updated

    async def delete(self, task_id: str) -> bool:
        """Delete task by ID.

        Returns:
            True when the task existed and was deleted; False when absent.
        """
        if not await self._task_repo.exists_by_id(task_id):
            return False
        await self._task_repo.delete_by_id(task_id)
        logger.info("Deleted task %s", task_id)
        return True

    async def get_task_statistics(self) -> TaskStatistics:
        """Return counts per status plus the total number of tasks."""
        counts = {
            status.stats_key: await self._task_repo.count_by_status(status)
            for status in TaskStatus
        }
        return TaskStatistics(total=await self._task_repo.count(), **counts)
