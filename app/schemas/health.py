"""Health and info API schemas."""

from pydantic import BaseModel, Field


class RootResponse(BaseModel):
    """Response for GET / (service banner)."""

    message: str = Field(..., description="Application banner")
    status: str = Field(default="running", description="Process status")


class HealthResponse(BaseModel):
    """Response for GET /health (liveness)."""

    status: str = Field(default="UP", description="Service status")
    service: str = Field(..., description="Service name")


class InfoResponse(BaseModel):
    """Response for GET /info."""

    application: str
    version: str
    description: str
