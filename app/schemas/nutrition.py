import datetime as dt
from typing import Annotated

from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer

from app.core.db import MAX_ID
from app.models.meal_record import MealType
from app.schemas.goals import GoalOut

# names or integer codes in, names out
MealTypeField = Annotated[
    MealType,
    BeforeValidator(MealType.parse),
    PlainSerializer(lambda m: MealType(m).label, return_type=str),
]

DATE_ALIASES = AliasChoices("date", "record_date")

RecordId = Annotated[int, Field(le=MAX_ID)]


class MealRecordCreate(BaseModel):
    meal_type: MealTypeField
    date: dt.date = Field(validation_alias=DATE_ALIASES)


class MealRecordUpdate(BaseModel):
    meal_type: MealTypeField | None = None
    date: dt.date | None = Field(default=None, validation_alias=DATE_ALIASES)


class MealRecordOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    meal_type: MealTypeField
    created_at: dt.datetime
    updated_at: dt.datetime
    date: dt.date


class FoodRecordCreate(BaseModel):
    meal_record_id: RecordId
    food_id: RecordId
    quantity: float = Field(gt=0)
    unit: str = Field(min_length=1, max_length=20)


class FoodRecordUpdate(BaseModel):
    quantity: float = Field(gt=0)
    unit: str | None = Field(default=None, min_length=1, max_length=20)


class FoodRecordOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    meal_record_id: int
    food_id: int
    food_name: str
    quantity: float
    unit: str
    calories: float
    protein: float
    carbohydrates: float
    fat: float
    created_at: dt.datetime
    updated_at: dt.datetime


class NutrientTotalsOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    calories: float
    protein: float
    carbohydrates: float
    fat: float


class MealRecordDetailOut(MealRecordOut):
    totals: NutrientTotalsOut
    food_records: list[FoodRecordOut]


class MealGroup(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    meal_type: MealTypeField
    meal_record_id: int | None
    totals: NutrientTotalsOut
    food_records: list[FoodRecordOut]


class DaySummaryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    totals: NutrientTotalsOut
    meals: list[MealGroup]
    goal: GoalOut | None
    date: dt.date
