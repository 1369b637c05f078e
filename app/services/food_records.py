"""Food records: quantified foods inside a meal record.

Nutrient values are denormalized onto each record at write time as
``quantity / 100 * food.<nutrient>``, using whatever the food holds at that
moment. Later edits to the food are not pushed into existing records.
"""
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from app.core.errors import AuthorizationError, NotFoundError, ValidationError
from app.models.food import Food
from app.models.food_record import FoodRecord
from app.models.meal_record import MealRecord
from app.repositories.food_records import FoodRecordRepository
from app.repositories.foods import FoodRepository
from app.repositories.meal_records import MealRecordRepository

logger = logging.getLogger(__name__)

BASELINE_QUANTITY = 100


@dataclass(frozen=True)
class NutrientTotals:
    calories: float = 0.0
    protein: float = 0.0
    carbohydrates: float = 0.0
    fat: float = 0.0

    def __add__(self, other: "NutrientTotals") -> "NutrientTotals":
        return NutrientTotals(
            calories=self.calories + other.calories,
            protein=self.protein + other.protein,
            carbohydrates=self.carbohydrates + other.carbohydrates,
            fat=self.fat + other.fat,
        )


def compute_nutrients(food: Food, quantity: float) -> NutrientTotals:
    if quantity <= 0:
        raise ValidationError("quantity must be greater than 0")
    ratio = quantity / BASELINE_QUANTITY
    return NutrientTotals(
        calories=ratio * food.calories,
        protein=ratio * food.protein,
        carbohydrates=ratio * food.carbohydrates,
        fat=ratio * food.fat,
    )


def sum_nutrients(records: Iterable[FoodRecord]) -> NutrientTotals:
    total = NutrientTotals()
    for r in records:
        total = total + NutrientTotals(r.calories, r.protein, r.carbohydrates, r.fat)
    return total


def apply_food(record: FoodRecord, food: Food, quantity: float) -> FoodRecord:
    nutrients = compute_nutrients(food, quantity)
    record.food_id = food.id
    record.food_name = food.name
    record.quantity = quantity
    record.calories = nutrients.calories
    record.protein = nutrients.protein
    record.carbohydrates = nutrients.carbohydrates
    record.fat = nutrients.fat
    return record


class FoodRecordService:
    def __init__(
        self,
        food_records: FoodRecordRepository,
        meals: MealRecordRepository,
        foods: FoodRepository,
    ):
        self.food_records = food_records
        self.meals = meals
        self.foods = foods

    async def _owned_meal(self, user_id: int, meal_id: int) -> MealRecord:
        meal = await self.meals.get(meal_id)
        if not meal:
            raise NotFoundError("meal record not found")
        if meal.user_id != user_id:
            logger.warning("user %s denied access to meal record %s", user_id, meal_id)
            raise AuthorizationError("meal record belongs to another user")
        return meal

    async def _food(self, food_id: int) -> Food:
        food = await self.foods.get(food_id)
        if not food:
            raise NotFoundError("food not found")
        return food

    async def get_owned(self, user_id: int, record_id: int) -> FoodRecord:
        record = await self.food_records.get(record_id)
        if not record:
            raise NotFoundError("food record not found")
        await self._owned_meal(user_id, record.meal_record_id)
        return record

    async def create(
        self,
        user_id: int,
        *,
        meal_record_id: int,
        food_id: int,
        quantity: float,
        unit: str,
    ) -> FoodRecord:
        meal = await self._owned_meal(user_id, meal_record_id)
        food = await self._food(food_id)

        record = apply_food(FoodRecord(meal_record_id=meal.id, unit=unit), food, quantity)
        record = await self.food_records.add(record)
        logger.info("added food record %s to meal record %s", record.id, meal.id)
        return record

    async def update(
        self,
        user_id: int,
        record_id: int,
        *,
        quantity: float,
        unit: str | None = None,
    ) -> FoodRecord:
        record = await self.get_owned(user_id, record_id)
        # same policy as create: values follow the food as it is now
        food = await self._food(record.food_id)

        apply_food(record, food, quantity)
        if unit:
            record.unit = unit
        return await self.food_records.save(record)

    async def list_for_meal(self, user_id: int, meal_id: int) -> list[FoodRecord]:
        meal = await self._owned_meal(user_id, meal_id)
        return await self.food_records.list_for_meal(meal.id)

    async def list_for_date(self, user_id: int, day: date) -> list[FoodRecord]:
        rows = await self.food_records.list_for_user_on_date(user_id, day)
        return [record for record, _ in rows]

    async def delete(self, user_id: int, record_id: int) -> None:
        record = await self.get_owned(user_id, record_id)
        await self.food_records.delete(record)
        logger.info("deleted food record %s", record_id)
