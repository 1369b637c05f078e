from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.user import GenderField


class GoalSet(BaseModel):
    calories: float = Field(gt=0)
    protein: float = Field(gt=0)
    carbohydrates: float = Field(gt=0)
    fat: float = Field(gt=0)


class GoalCalculate(BaseModel):
    # checked by the calculator so a bad value reads the same from every caller
    goal_type: str

    # optional overrides for the stored profile
    gender: GenderField = None
    age: int | None = Field(default=None, ge=0)
    height_cm: float | None = Field(default=None, ge=0)
    weight_kg: float | None = Field(default=None, ge=0)
    activity_level: int | None = Field(default=None, ge=0)


class GoalOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    calories: float
    protein: float
    carbohydrates: float
    fat: float
    created_at: datetime
    updated_at: datetime
