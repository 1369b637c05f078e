from sqlalchemy import func, select

from app.models.food import Food
from app.models.food_record import FoodRecord
from app.repositories.base import Repository


class FoodRepository(Repository[Food]):
    model = Food

    async def search(self, query: str | None = None, limit: int = 50, offset: int = 0) -> list[Food]:
        stmt = select(Food)
        if query:
            stmt = stmt.where(Food.name.ilike(f"%{query.strip()}%"))
        stmt = stmt.order_by(Food.name.asc(), Food.id.asc()).limit(limit).offset(offset)
        res = await self.db.execute(stmt)
        return list(res.scalars().all())

    async def count_references(self, food_id: int) -> int:
        res = await self.db.execute(
            select(func.count(FoodRecord.id)).where(FoodRecord.food_id == food_id)
        )
        return int(res.scalar_one())
