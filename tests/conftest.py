"""Pytest configuration and fixtures for the task API.

Uses app.main:app for HTTP tests. The SQL backend runs against a fresh
in-memory SQLite database per test (aiosqlite + StaticPool), swapped into
app.infrastructure.persistence.database so request dependencies pick it up.
"""

import os

# Before importing the app: settings are read when create_app() runs.
os.environ.setdefault("DATABASE_BACKEND", "sql")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("DB_CREATE_SCHEMA", "false")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.infrastructure.memory import InMemoryTaskStore, get_memory_store
from app.infrastructure.persistence import database
from app.main import app

TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture
async def sql_database():
    """Fresh in-memory SQLite database with the task table; installed as the app engine."""
    engine, factory = database.create_session_factory(TEST_DATABASE_URL)
    await database.create_schema(engine)
    database.engine, database.AsyncSessionLocal = engine, factory
    yield factory
    await database.dispose_engine()


@pytest.fixture
async def db_session(sql_database) -> AsyncSession:
    """Database session for repository tests. Rolls back after test.

    Mark tests that use it with @pytest.mark.requires_db; run without them via
    pytest -m "not requires_db".
    """
    async with sql_database() as session:
        yield session
        await session.rollback()


@pytest.fixture
def memory_store() -> InMemoryTaskStore:
    """Process-wide in-memory store, emptied before and after the test."""
    store = get_memory_store()
    store.clear()
    yield store
    store.clear()


@pytest.fixture(params=["sql", "memory"])
def backend(request, monkeypatch) -> str:
    """Storage backend selected through DATABASE_BACKEND for this test."""
    monkeypatch.setenv("DATABASE_BACKEND", request.param)
    get_settings.cache_clear()
    yield request.param
    get_settings.cache_clear()


@pytest.fixture
async def client(backend, sql_database, memory_store) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI), once per storage backend."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
