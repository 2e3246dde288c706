"""Base repository: generic get/list/create/update/delete over one ORM model."""

from typing import Any, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.persistence.database import Base


ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with get_by_id, get_all, exists, count, create, update, delete.

    Subclasses add model-specific queries and map rows to DTOs.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_by_id(self, entity_id: str) -> ModelType | None:
        """Return a single record by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def get_all(self, *order_by: Any) -> list[ModelType]:
        """Return every record (unbounded), optionally ordered."""
        result = await self.db.execute(select(self.model).order_by(*order_by))
        return list(result.scalars().all())

    async def exists(self, entity_id: str) -> bool:
        """Return whether a record with entity_id exists."""
        model: Any = self.model
        result = await self.db.execute(
            select(model.id).where(model.id == entity_id).limit(1)
        )
        return result.scalar_one_or_none() is not None

    async def count_where(self, *criteria: Any) -> int:
        """Return the number of records matching criteria (all records when none)."""
        stmt = select(func.count()).select_from(self.model)
        if criteria:
            stmt = stmt.where(*criteria)
        result = await self.db.execute(stmt)
        return int(result.scalar_one())

    async def create(self, obj: ModelType) -> ModelType:
        """Persist a new record and return it with generated columns loaded."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def update(self, obj: ModelType) -> ModelType:
        """Flush changes on an attached record and return it refreshed."""
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def delete(self, obj: ModelType) -> None:
        """Delete the record."""
        await self.db.delete(obj)
        await self.db.flush()
