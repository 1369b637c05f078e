import logging

from app.core.errors import NotFoundError
from app.models.nutrition_goal import NutritionGoal
from app.repositories.nutrition_goals import NutritionGoalRepository
from app.repositories.users import UserRepository
from app.services.goal_calculator import Biometrics, GoalTargets, calculate_targets

logger = logging.getLogger(__name__)


class NutritionGoalService:
    def __init__(self, goals: NutritionGoalRepository, users: UserRepository):
        self.goals = goals
        self.users = users

    async def get(self, user_id: int) -> NutritionGoal:
        goal = await self.goals.get_for_user(user_id)
        if not goal:
            raise NotFoundError("nutrition goal not set")
        return goal

    async def set(self, user_id: int, targets: GoalTargets) -> NutritionGoal:
        if not await self.users.get(user_id):
            raise NotFoundError("user not found")
        return await self._upsert(user_id, targets)

    async def calculate(self, user_id: int, goal_type, overrides: dict | None = None) -> NutritionGoal:
        user = await self.users.get(user_id)
        if not user:
            raise NotFoundError("user not found")

        biometrics = Biometrics.from_user(user).with_overrides(**(overrides or {}))
        targets = calculate_targets(biometrics, goal_type)
        return await self._upsert(user_id, targets)

    async def _upsert(self, user_id: int, targets: GoalTargets) -> NutritionGoal:
        # a missing goal just means this is the first write
        goal = await self.goals.get_for_user(user_id)
        if goal is None:
            goal = await self.goals.add(
                NutritionGoal(
                    user_id=user_id,
                    calories=targets.calories,
                    protein=targets.protein,
                    carbohydrates=targets.carbohydrates,
                    fat=targets.fat,
                )
            )
            logger.info("created nutrition goal for user %s", user_id)
            return goal

        goal.calories = targets.calories
        goal.protein = targets.protein
        goal.carbohydrates = targets.carbohydrates
        goal.fat = targets.fat
        return await self.goals.save(goal)
