from fastapi import APIRouter, Depends, Path, Query

from app.core.db import MAX_ID
from app.core.deps import get_current_user, get_food_service
from app.core.responses import envelope
from app.schemas.foods import FoodCreate, FoodOut, FoodUpdate
from app.services.foods import FoodService

router = APIRouter(prefix="/foods", tags=["foods"], dependencies=[Depends(get_current_user)])


@router.get("")
async def list_foods(
    q: str | None = None,
    limit: int = Query(default=50, ge=1, le=200),
    offset: int = Query(default=0, ge=0),
    foods: FoodService = Depends(get_food_service),
):
    items = await foods.search(q, limit=limit, offset=offset)
    return envelope([FoodOut.model_validate(f) for f in items])


@router.post("", status_code=201)
async def create_food(payload: FoodCreate, foods: FoodService = Depends(get_food_service)):
    food = await foods.create(**payload.model_dump())
    return envelope(FoodOut.model_validate(food), "food created", 201)


@router.get("/{food_id}")
async def get_food(food_id: int = Path(le=MAX_ID), foods: FoodService = Depends(get_food_service)):
    return envelope(FoodOut.model_validate(await foods.get(food_id)))


@router.put("/{food_id}")
async def update_food(
    payload: FoodUpdate,
    food_id: int = Path(le=MAX_ID),
    foods: FoodService = Depends(get_food_service),
):
    food = await foods.update(food_id, payload.model_dump(exclude_unset=True))
    return envelope(FoodOut.model_validate(food), "food updated")


@router.delete("/{food_id}")
async def delete_food(food_id: int = Path(le=MAX_ID), foods: FoodService = Depends(get_food_service)):
    await foods.delete(food_id)
    return envelope(message="food deleted")
