"""Domain layer: entities, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.entities import TaskEntity
from app.domain.enums import TaskStatus
from app.domain.exceptions import (
    ResourceNotFoundException,
    SqlNotConfiguredException,
    TaskManagerException,
    ValidationException,
)

__all__ = [
    # Entities
    "TaskEntity",
    # Enums
    "TaskStatus",
    # Exceptions
    "ResourceNotFoundException",
    "SqlNotConfiguredException",
    "TaskManagerException",
    "ValidationException",
]
