"""Pydantic request/response schemas for the API."""

from app.schemas.health import HealthResponse, InfoResponse, RootResponse
from app.schemas.task import TaskRequest, TaskResponse, TaskStatsResponse

__all__ = [
    "HealthResponse",
    "InfoResponse",
    "RootResponse",
    "TaskRequest",
    "TaskResponse",
    "TaskStatsResponse",
]
