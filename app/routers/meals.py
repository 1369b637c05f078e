from datetime import date

from fastapi import APIRouter, Depends, Path

from app.core.db import MAX_ID
from app.core.deps import get_current_user, get_meal_service
from app.core.responses import envelope
from app.models.user import User
from app.schemas.nutrition import (
    DaySummaryOut,
    MealRecordCreate,
    MealRecordDetailOut,
    MealRecordOut,
    MealRecordUpdate,
)
from app.services.food_records import sum_nutrients
from app.services.meals import MealRecordService

router = APIRouter(prefix="/meals", tags=["meals"])


@router.post("", status_code=201)
async def create_meal(
    payload: MealRecordCreate,
    user: User = Depends(get_current_user),
    meals: MealRecordService = Depends(get_meal_service),
):
    meal = await meals.create(user.id, payload.date, payload.meal_type)
    return envelope(MealRecordOut.model_validate(meal), "meal record created", 201)


@router.get("")
async def list_meals(
    date: date | None = None,
    user: User = Depends(get_current_user),
    meals: MealRecordService = Depends(get_meal_service),
):
    items = await meals.list_for_date(user.id, date or date_today())
    return envelope([MealRecordOut.model_validate(m) for m in items])


@router.get("/summary")
async def day_summary(
    date: date | None = None,
    user: User = Depends(get_current_user),
    meals: MealRecordService = Depends(get_meal_service),
):
    summary = await meals.summarize_day(user.id, date or date_today())
    return envelope(DaySummaryOut.model_validate(summary))


@router.get("/{meal_id}")
async def get_meal(
    meal_id: int = Path(le=MAX_ID),
    user: User = Depends(get_current_user),
    meals: MealRecordService = Depends(get_meal_service),
):
    meal, records = await meals.get_with_records(user.id, meal_id)
    detail = MealRecordDetailOut.model_validate(
        {
            **MealRecordOut.model_validate(meal).model_dump(),
            "totals": sum_nutrients(records),
            "food_records": records,
        },
        from_attributes=True,
    )
    return envelope(detail)


@router.put("/{meal_id}")
async def update_meal(
    payload: MealRecordUpdate,
    meal_id: int = Path(le=MAX_ID),
    user: User = Depends(get_current_user),
    meals: MealRecordService = Depends(get_meal_service),
):
    meal = await meals.update(user.id, meal_id, day=payload.date, meal_type=payload.meal_type)
    return envelope(MealRecordOut.model_validate(meal), "meal record updated")


@router.delete("/{meal_id}")
async def delete_meal(
    meal_id: int = Path(le=MAX_ID),
    user: User = Depends(get_current_user),
    meals: MealRecordService = Depends(get_meal_service),
):
    await meals.delete(user.id, meal_id)
    return envelope(message="meal record deleted")


def date_today() -> date:
    return date.today()
