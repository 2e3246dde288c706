"""Domain enumerations for the task API.

Enums represent fixed sets of domain values (e.g. task status).
"""

from enum import Enum


class TaskStatus(str, Enum):
    """Task lifecycle status.

    Every stored task carries exactly one of these values. CANCELLED tasks
    are excluded from the active-task listing.
    """

    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"
    CANCELLED = "CANCELLED"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid status values as strings.

        Returns:
            List of enum value strings (e.g. for validation or serialization).
        """
        return [status.value for status in cls]

    @property
    def is_active(self) -> bool:
        """True for every status except CANCELLED."""
        return self is not TaskStatus.CANCELLED

    @property
    def stats_key(self) -> str:
        """Key used for this status in the statistics mapping (e.g. 'in_progress')."""
        return self.value.lower()
