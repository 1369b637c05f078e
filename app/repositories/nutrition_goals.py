from sqlalchemy import select

from app.models.nutrition_goal import NutritionGoal
from app.repositories.base import Repository


class NutritionGoalRepository(Repository[NutritionGoal]):
    model = NutritionGoal

    async def get_for_user(self, user_id: int) -> NutritionGoal | None:
        res = await self.db.execute(
            select(NutritionGoal).where(NutritionGoal.user_id == user_id)
        )
        return res.scalar_one_or_none()
