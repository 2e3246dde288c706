"""Task domain entity.

Represents the caller-editable part of a task, independent of persistence.
Identity (id) and timestamps are owned by the store.
"""

from dataclasses import dataclass
from datetime import datetime

from app.domain.enums import TaskStatus
from app.domain.exceptions import ValidationException

TITLE_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 2000
# Range of the 32-bit priority column.
PRIORITY_MIN = -(2**31)
PRIORITY_MAX = 2**31 - 1


@dataclass
class TaskEntity:
    """Mutable task fields: title, description, status, priority.

    Used both for create and for update. Update replaces all four fields,
    so a field left at its default here overwrites the stored value.
    Validation runs on construction.
    """

    title: str
    description: str | None = None
    status: TaskStatus = TaskStatus.TODO
    priority: int = 0

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate task business rules. Raises ValidationException if invalid."""
        if not self.title or not self.title.strip():
            raise ValidationException("Task title is required", field="title")
        if len(self.title) > TITLE_MAX_LENGTH:
            raise ValidationException(
                f"Task title must be at most {TITLE_MAX_LENGTH} characters",
                field="title",
            )
        if self.description is not None and len(self.description) > DESCRIPTION_MAX_LENGTH:
            raise ValidationException(
                f"Task description must be at most {DESCRIPTION_MAX_LENGTH} characters",
                field="description",
            )
        if not isinstance(self.status, TaskStatus):
            try:
                self.status = TaskStatus(self.status)
            except ValueError:
                raise ValidationException(
                    f"Invalid task status: {self.status!r}", field="status"
                ) from None
        if isinstance(self.priority, bool) or not isinstance(self.priority, int):
            raise ValidationException("Task priority must be an integer", field="priority")
        if not PRIORITY_MIN <= self.priority <= PRIORITY_MAX:
            raise ValidationException(
                f"Task priority must be between {PRIORITY_MIN} and {PRIORITY_MAX}",
                field="priority",
            )

    def completed_at_after_save(
        self,
        previous_status: TaskStatus | None,
        previous_completed_at: datetime | None,
        now: datetime,
    ) -> datetime | None:
        """Return completed_at for the row after this entity is saved.

        Set to now when the task enters DONE, kept while it stays DONE,
        cleared when it leaves DONE.

        Args:
            previous_status: Stored status before the save (None on create).
            previous_completed_at: Stored completed_at before the save.
            now: Save timestamp (UTC).
        """
        if self.status is not TaskStatus.DONE:
            return None
        if previous_status is TaskStatus.DONE and previous_completed_at is not None:
            return previous_completed_at
        return now
