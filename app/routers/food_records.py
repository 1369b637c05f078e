from datetime import date

from fastapi import APIRouter, Depends, Path, Query

from app.core.db import MAX_ID
from app.core.deps import get_current_user, get_food_record_service
from app.core.responses import envelope
from app.models.user import User
from app.schemas.nutrition import FoodRecordCreate, FoodRecordOut, FoodRecordUpdate
from app.services.food_records import FoodRecordService

router = APIRouter(prefix="/food-records", tags=["food-records"])


@router.post("", status_code=201)
async def create_food_record(
    payload: FoodRecordCreate,
    user: User = Depends(get_current_user),
    records: FoodRecordService = Depends(get_food_record_service),
):
    record = await records.create(user.id, **payload.model_dump())
    return envelope(FoodRecordOut.model_validate(record), "food record created", 201)


@router.get("")
async def list_food_records(
    meal_id: int | None = Query(default=None, le=MAX_ID),
    date: date | None = None,
    user: User = Depends(get_current_user),
    records: FoodRecordService = Depends(get_food_record_service),
):
    if meal_id is not None:
        items = await records.list_for_meal(user.id, meal_id)
    else:
        items = await records.list_for_date(user.id, date or date_today())
    return envelope([FoodRecordOut.model_validate(r) for r in items])


@router.get("/{record_id}")
async def get_food_record(
    record_id: int = Path(le=MAX_ID),
    user: User = Depends(get_current_user),
    records: FoodRecordService = Depends(get_food_record_service),
):
    return envelope(FoodRecordOut.model_validate(await records.get_owned(user.id, record_id)))


@router.put("/{record_id}")
async def update_food_record(
    payload: FoodRecordUpdate,
    record_id: int = Path(le=MAX_ID),
    user: User = Depends(get_current_user),
    records: FoodRecordService = Depends(get_food_record_service),
):
    record = await records.update(user.id, record_id, quantity=payload.quantity, unit=payload.unit)
    return envelope(FoodRecordOut.model_validate(record), "food record updated")


@router.delete("/{record_id}")
async def delete_food_record(
    record_id: int = Path(le=MAX_ID),
    user: User = Depends(get_current_user),
    records: FoodRecordService = Depends(get_food_record_service),
):
    await records.delete(user.id, record_id)
    return envelope(message="food record deleted")


def date_today() -> date:
    return date.today()
