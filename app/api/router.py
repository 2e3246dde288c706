"""API router aggregation.

Health/info routes have no prefix; task routes live under /api/tasks.
All routes use dependencies from app.api.dependencies (no manual repo/service construction).
"""

from fastapi import APIRouter

from app.api.endpoints import health, tasks

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(tasks.router, prefix="/api/tasks", tags=["tasks"])
