"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Used by main.py;
no business logic here, only wiring of infrastructure (logging,
schema creation, DB engine dispose).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.core.config import get_settings
from app.shared.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: logging, then (sql backend with db_create_schema) table creation.
    Shutdown: SQL engine dispose.
    """
    settings = get_settings()

    # ---- Startup ----
    setup_logging()

    if settings.database_backend == "sql" and settings.db_create_schema:
        from app.infrastructure.persistence.database import create_schema

        await create_schema()
        logger.info("Database schema ready")

    logger.info(
        "%s %s started (backend=%s)",
        settings.app_name,
        settings.app_version,
        settings.database_backend,
    )

    yield

    # ---- Shutdown ----
    from app.infrastructure.persistence.database import dispose_engine

    await dispose_engine()
