from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.core.errors import AuthenticationError
from app.core.security import decode_token
from app.models.user import User
from app.repositories.food_records import FoodRecordRepository
from app.repositories.foods import FoodRepository
from app.repositories.meal_records import MealRecordRepository
from app.repositories.nutrition_goals import NutritionGoalRepository
from app.repositories.users import UserRepository
from app.services.food_records import FoodRecordService
from app.services.foods import FoodService
from app.services.goals import NutritionGoalService
from app.services.meals import MealRecordService
from app.services.users import UserService

bearer = HTTPBearer(auto_error=False)

async def get_current_user(
    creds: HTTPAuthorizationCredentials = Depends(bearer),
    db: AsyncSession = Depends(get_db),
) -> User:
    if creds is None or not creds.credentials:
        raise AuthenticationError("missing bearer token")

    data = decode_token(creds.credentials)

    user = await UserRepository(db).get(data["user_id"])
    if not user:
        raise AuthenticationError("user not found")

    return user


def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    return UserService(UserRepository(db))


def get_food_service(db: AsyncSession = Depends(get_db)) -> FoodService:
    return FoodService(FoodRepository(db))


def get_goal_service(db: AsyncSession = Depends(get_db)) -> NutritionGoalService:
    return NutritionGoalService(NutritionGoalRepository(db), UserRepository(db))


def get_meal_service(db: AsyncSession = Depends(get_db)) -> MealRecordService:
    return MealRecordService(
        MealRecordRepository(db),
        FoodRecordRepository(db),
        NutritionGoalRepository(db),
    )


def get_food_record_service(db: AsyncSession = Depends(get_db)) -> FoodRecordService:
    return FoodRecordService(
        FoodRecordRepository(db),
        MealRecordRepository(db),
        FoodRepository(db),
    )
