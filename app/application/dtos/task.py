"""DTOs for tasks (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from app.domain.enums import TaskStatus


@dataclass(frozen=True)
class TaskResult:
    """Persisted task as returned by every store operation."""

    id: str
    title: str
    description: str | None
    status: TaskStatus
    priority: int
    created_at: datetime
    updated_at: datetime
    completed_at: datetime | None = None


@dataclass(frozen=True)
class TaskStatistics:
    """Task counts per status. total counts every task regardless of status."""

    total: int
    todo: int
    in_progress: int
    done: int
    cancelled: int

    def as_dict(self) -> dict[str, int]:
        """Return the statistics mapping (total, todo, in_progress, done, cancelled)."""
        return {
            "total": self.total,
            "todo": self.todo,
            "in_progress": self.in_progress,
            "done": self.done,
            "cancelled": self.cancelled,
        }
