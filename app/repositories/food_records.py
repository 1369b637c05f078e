from datetime import date

from sqlalchemy import select

from app.models.food_record import FoodRecord
from app.models.meal_record import MealRecord
from app.repositories.base import Repository


class FoodRecordRepository(Repository[FoodRecord]):
    model = FoodRecord

    async def list_for_meal(self, meal_record_id: int) -> list[FoodRecord]:
        res = await self.db.execute(
            select(FoodRecord)
            .where(FoodRecord.meal_record_id == meal_record_id)
            .order_by(FoodRecord.created_at.asc(), FoodRecord.id.asc())
        )
        return list(res.scalars().all())

    async def list_for_user_on_date(
        self, user_id: int, day: date
    ) -> list[tuple[FoodRecord, int]]:
        """Food records of a user's day, each paired with its meal type code."""
        res = await self.db.execute(
            select(FoodRecord, MealRecord.meal_type)
            .join(MealRecord, MealRecord.id == FoodRecord.meal_record_id)
            .where(MealRecord.user_id == user_id, MealRecord.date == day)
            .order_by(MealRecord.meal_type.asc(), FoodRecord.id.asc())
        )
        return [(row[0], row[1]) for row in res.all()]
