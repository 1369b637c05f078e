import logging

from app.core.errors import ConflictError, NotFoundError
from app.models.food import Food
from app.repositories.foods import FoodRepository

logger = logging.getLogger(__name__)

NUTRIENT_FIELDS = ("calories", "protein", "carbohydrates", "fat")


class FoodService:
    def __init__(self, foods: FoodRepository):
        self.foods = foods

    async def get(self, food_id: int) -> Food:
        food = await self.foods.get(food_id)
        if not food:
            raise NotFoundError("food not found")
        return food

    async def search(self, query: str | None = None, limit: int = 50, offset: int = 0) -> list[Food]:
        return await self.foods.search(query, limit=limit, offset=offset)

    async def create(self, *, name: str, calories: float, protein: float,
                     carbohydrates: float, fat: float) -> Food:
        food = await self.foods.add(
            Food(
                name=name.strip(),
                calories=calories,
                protein=protein,
                carbohydrates=carbohydrates,
                fat=fat,
            )
        )
        logger.info("created food %s (%s)", food.id, food.name)
        return food

    async def update(self, food_id: int, changes: dict) -> Food:
        # existing food records keep the values they were written with
        food = await self.get(food_id)
        for field, value in changes.items():
            if value is None:
                continue
            if field == "name":
                food.name = value.strip()
            elif field in NUTRIENT_FIELDS:
                setattr(food, field, value)
        return await self.foods.save(food)

    async def delete(self, food_id: int) -> None:
        food = await self.get(food_id)
        refs = await self.foods.count_references(food.id)
        if refs:
            raise ConflictError(f"food is used by {refs} food record(s) and cannot be deleted")
        await self.foods.delete(food)
        logger.info("deleted food %s", food_id)
