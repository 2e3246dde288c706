"""Health and info endpoints (no prefix). No dependencies; used for liveness probes."""

from fastapi import APIRouter

from app.core.config import get_settings
from app.schemas.health import HealthResponse, InfoResponse, RootResponse

router = APIRouter()


@router.get("/", response_model=RootResponse)
def root() -> RootResponse:
    """Return the service banner and running status."""
    return RootResponse(message=get_settings().app_message)


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return UP status for liveness."""
    return HealthResponse(service=get_settings().app_name)


@router.get("/info", response_model=InfoResponse)
def info() -> InfoResponse:
    """Return application name, version and description."""
    settings = get_settings()
    return InfoResponse(
        application=settings.app_name,
        version=settings.app_version,
        description=settings.app_description,
    )
