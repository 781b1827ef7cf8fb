"""Shared async SQLAlchemy data access for catalog entities."""

from datetime import datetime
from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import exists, func, select
from sqlalchemy.ext.asyncio import AsyncSession

ModelT = TypeVar("ModelT")


class EntityRepository(Generic[ModelT]):
    """Existence, count, insert and lookup queries over one model.

    Subclasses set ``model``. The model needs ``id`` and ``created_at``
    columns.
    """

    model: type

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _exists(self, *criteria: Any) -> bool:
        result = await self.db.execute(select(exists().where(*criteria)))
        return bool(result.scalar())

    async def count_created_between(self, start: datetime, end: datetime) -> int:
        """Count entities created in ``[start, end)``."""
        result = await self.db.execute(
            select(func.count(self.model.id)).where(
                self.model.created_at >= start,
                self.model.created_at < end,
            )
        )
        return result.scalar_one()

    async def add(self, entity: ModelT) -> ModelT:
        """Insert and commit. Rolls back and re-raises on failure."""
        self.db.add(entity)
        try:
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise
        await self.db.refresh(entity)
        return entity

    async def list_all(self) -> list[ModelT]:
        result = await self.db.execute(
            select(self.model).order_by(self.model.created_at.desc())
        )
        return list(result.scalars().all())

    async def get_by_id(self, entity_id: UUID) -> ModelT | None:
        result = await self.db.execute(
            select(self.model).where(self.model.id == entity_id)
        )
        return result.scalar_one_or_none()
