"""In-memory persistence backend (DATABASE_BACKEND=memory)."""

from app.infrastructure.memory.task_repo_memory import (
    InMemoryTaskRepository,
    InMemoryTaskStore,
    get_memory_store,
)

__all__ = [
    "InMemoryTaskRepository",
    "InMemoryTaskStore",
    "get_memory_store",
]
