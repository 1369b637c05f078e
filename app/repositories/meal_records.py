from datetime import date

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError

from app.core.errors import ConflictError
from app.models.food_record import FoodRecord
from app.models.meal_record import MealRecord, MealType
from app.repositories.base import Repository

DUPLICATE_MEAL = "meal record already exists for this date and meal type"


class MealRecordRepository(Repository[MealRecord]):
    model = MealRecord

    async def add(self, obj: MealRecord) -> MealRecord:
        try:
            return await super().add(obj)
        except IntegrityError:
            await self.db.rollback()
            raise ConflictError(DUPLICATE_MEAL)

    async def save(self, obj: MealRecord) -> MealRecord:
        try:
            return await super().save(obj)
        except IntegrityError:
            await self.db.rollback()
            raise ConflictError(DUPLICATE_MEAL)

    async def list_for_user_on_date(self, user_id: int, day: date) -> list[MealRecord]:
        res = await self.db.execute(
            select(MealRecord)
            .where(MealRecord.user_id == user_id, MealRecord.date == day)
            .order_by(MealRecord.meal_type.asc())
        )
        return list(res.scalars().all())

    async def find_by_user_date_type(
        self, user_id: int, day: date, meal_type: MealType
    ) -> MealRecord | None:
        res = await self.db.execute(
            select(MealRecord).where(
                MealRecord.user_id == user_id,
                MealRecord.date == day,
                MealRecord.meal_type == int(meal_type),
            )
        )
        return res.scalar_one_or_none()

    async def delete(self, obj: MealRecord) -> None:
        # explicit so the cascade does not depend on the backend honouring ON DELETE
        await self.db.execute(delete(FoodRecord).where(FoodRecord.meal_record_id == obj.id))
        await self.db.delete(obj)
        await self.db.commit()
