"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.mixins import (
    CuidTimestampModel,
    CuidMixin,
    TimestampMixin,
)
from app.infrastructure.persistence.models.task import Task

__all__ = [
    "CuidTimestampModel",
    "CuidMixin",
    "Task",
    "TimestampMixin",
]
