from typing import Generic, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import Base

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
    """Plain CRUD over one mapped class; subclasses add their own queries."""

    model: type[ModelT]

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, obj_id: int) -> ModelT | None:
        return await self.db.get(self.model, obj_id)

    async def add(self, obj: ModelT) -> ModelT:
        self.db.add(obj)
        await self.db.commit()
        await self.db.refresh(obj)
        return obj

    async def save(self, obj: ModelT) -> ModelT:
        await self.db.commit()
        await self.db.refresh(obj)
        return obj

    async def delete(self, obj: ModelT) -> None:
        await self.db.delete(obj)
        await self.db.commit()
