from typing import Annotated, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict, EmailStr, Field
from datetime import datetime

GENDER_CODES = {1: "male", 2: "female"}


def parse_gender(value):
    """Accept "male"/"female" or the numeric codes 1/2; 0 and "" mean unset."""
    if value is None or value == "" or value == 0:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        if value not in GENDER_CODES:
            raise ValueError("gender must be male (1) or female (2)")
        return GENDER_CODES[value]
    if isinstance(value, str):
        return value.strip().lower()
    return value


GenderField = Annotated[Literal["male", "female"] | None, BeforeValidator(parse_gender)]


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: EmailStr
    nickname: str | None = None
    gender: str | None = None
    age: int | None = None
    height_cm: float | None = None
    weight_kg: float | None = None
    activity_level: int
    created_at: datetime
    updated_at: datetime


class ProfileUpdate(BaseModel):
    nickname: str | None = Field(default=None, min_length=1, max_length=50)
    gender: GenderField = None
    age: int | None = Field(default=None, gt=0, le=150)
    height_cm: float | None = Field(default=None, gt=0, le=300)
    weight_kg: float | None = Field(default=None, gt=0, le=700)
    activity_level: int | None = Field(default=None, ge=1, le=5)
