"""Task API schemas.

JSON uses camelCase (createdAt, updatedAt, completedAt); request bodies
accept camelCase or snake_case field names.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.domain.entities.task import (
    DESCRIPTION_MAX_LENGTH,
    PRIORITY_MAX,
    PRIORITY_MIN,
    TITLE_MAX_LENGTH,
    TaskEntity,
)
from app.domain.enums import TaskStatus


class TaskRequest(BaseModel):
    """Request body for creating or replacing a task.

    Used by POST and PUT. On PUT every field replaces the stored value, so an
    omitted field is written back as its default below.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    status: TaskStatus = TaskStatus.TODO
    priority: int = Field(default=0, ge=PRIORITY_MIN, le=PRIORITY_MAX)

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("title must not be blank")
        return v

    def to_entity(self) -> TaskEntity:
        """Build the domain entity from the request fields."""
        return TaskEntity(
            title=self.title,
            description=self.description,
            status=self.status,
            priority=self.priority,
        )


class TaskResponse(BaseModel):
    """Task as returned by the API."""

    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True
    )

    id: str
    title: str
    description: str | None
    status: TaskStatus
    priority: int
    created_at: datetime
    updated_at: datetime
    completed_at: datetime | None = None


class TaskStatsResponse(BaseModel):
    """Response for GET /api/tasks/stats. total counts every task."""

    model_config = ConfigDict(from_attributes=True)

    total: int = Field(..., ge=0)
    todo: int = Field(..., ge=0)
    in_progress: int = Field(..., ge=0)
    done: int = Field(..., ge=0)
    cancelled: int = Field(..., ge=0)
