"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs or domain types only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from app.domain.enums import TaskStatus

if TYPE_CHECKING:
    from app.application.dtos.task import TaskResult
    from app.domain.entities.task import TaskEntity


# Task repository interface
class ITaskRepository(Protocol):
    """Protocol for task store (DIP).

    Implemented by the SQL repository and the in-memory repository. Lookups
    return None for a missing id; only storage faults raise.
    """

    async def find_all(self) -> list[TaskResult]:
        """Return all tasks (oldest first)."""

    async def find_by_id(self, task_id: str) -> TaskResult | None:
        """Return task by ID, or None."""

    async def find_by_status(self, status: TaskStatus) -> list[TaskResult]:
        """Return tasks with status, priority desc then created_at desc."""

    async def find_active_ordered_by_priority(self) -> list[TaskResult]:
        """Return non-CANCELLED tasks, priority desc then created_at desc."""

    async def count(self) -> int:
        """Return the number of stored tasks."""

    async def count_by_status(self, status: TaskStatus) -> int:
        """Return the number of tasks with status."""

    async def save(self, task: TaskEntity, task_id: str | None = None) -> TaskResult:
        """Insert (task_id None) or overwrite mutable fields of task_id; return the record."""

    async def exists_by_id(self, task_id: str) -> bool:
        """Return whether a task with task_id exists."""

    async def delete_by_id(self, task_id: str) -> None:
        """Delete task by ID (no-op when absent)."""
