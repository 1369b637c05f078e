import logging
from dataclasses import dataclass, field
from datetime import date

from app.core.errors import AuthorizationError, ConflictError, NotFoundError
from app.models.food_record import FoodRecord
from app.models.meal_record import MealRecord, MealType
from app.models.nutrition_goal import NutritionGoal
from app.repositories.food_records import FoodRecordRepository
from app.repositories.meal_records import DUPLICATE_MEAL, MealRecordRepository
from app.repositories.nutrition_goals import NutritionGoalRepository
from app.services.food_records import NutrientTotals, sum_nutrients

logger = logging.getLogger(__name__)


@dataclass
class MealSummary:
    meal_type: MealType
    meal_record_id: int | None
    totals: NutrientTotals
    food_records: list[FoodRecord] = field(default_factory=list)


@dataclass
class DaySummary:
    date: date
    totals: NutrientTotals
    meals: list[MealSummary]
    goal: NutritionGoal | None


class MealRecordService:
    def __init__(
        self,
        meals: MealRecordRepository,
        food_records: FoodRecordRepository,
        goals: NutritionGoalRepository,
    ):
        self.meals = meals
        self.food_records = food_records
        self.goals = goals

    async def get_owned(self, user_id: int, meal_id: int) -> MealRecord:
        meal = await self.meals.get(meal_id)
        if not meal:
            raise NotFoundError("meal record not found")
        if meal.user_id != user_id:
            logger.warning("user %s denied access to meal record %s", user_id, meal_id)
            raise AuthorizationError("meal record belongs to another user")
        return meal

    async def create(self, user_id: int, day: date, meal_type: MealType) -> MealRecord:
        # the unique constraint catches the race this check cannot
        if await self.meals.find_by_user_date_type(user_id, day, meal_type):
            raise ConflictError(DUPLICATE_MEAL)

        meal = await self.meals.add(MealRecord(user_id=user_id, date=day, meal_type=int(meal_type)))
        logger.info("created meal record %s for user %s", meal.id, user_id)
        return meal

    async def list_for_date(self, user_id: int, day: date) -> list[MealRecord]:
        return await self.meals.list_for_user_on_date(user_id, day)

    async def update(
        self,
        user_id: int,
        meal_id: int,
        day: date | None = None,
        meal_type: MealType | None = None,
    ) -> MealRecord:
        meal = await self.get_owned(user_id, meal_id)
        new_day = day or meal.date
        new_type = meal_type or MealType(meal.meal_type)

        existing = await self.meals.find_by_user_date_type(user_id, new_day, new_type)
        if existing and existing.id != meal.id:
            raise ConflictError(DUPLICATE_MEAL)

        meal.date = new_day
        meal.meal_type = int(new_type)
        return await self.meals.save(meal)

    async def delete(self, user_id: int, meal_id: int) -> None:
        meal = await self.get_owned(user_id, meal_id)
        await self.meals.delete(meal)
        logger.info("deleted meal record %s and its food records", meal_id)

    async def get_with_records(self, user_id: int, meal_id: int) -> tuple[MealRecord, list[FoodRecord]]:
        meal = await self.get_owned(user_id, meal_id)
        return meal, await self.food_records.list_for_meal(meal.id)

    async def summarize_day(self, user_id: int, day: date) -> DaySummary:
        meals = {MealType(m.meal_type): m for m in await self.meals.list_for_user_on_date(user_id, day)}
        rows = await self.food_records.list_for_user_on_date(user_id, day)

        by_type: dict[MealType, list[FoodRecord]] = {mt: [] for mt in MealType}
        for record, code in rows:
            by_type[MealType(code)].append(record)

        groups = []
        for mt in MealType:
            meal = meals.get(mt)
            groups.append(
                MealSummary(
                    meal_type=mt,
                    meal_record_id=meal.id if meal else None,
                    totals=sum_nutrients(by_type[mt]),
                    food_records=by_type[mt],
                )
            )

        return DaySummary(
            date=day,
            totals=sum_nutrients(record for record, _ in rows),
            meals=groups,
            goal=await self.goals.get_for_user(user_id),
        )
