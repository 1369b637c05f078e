from fastapi import APIRouter, Depends

from app.core.deps import get_current_user, get_goal_service
from app.core.responses import envelope
from app.models.user import User
from app.schemas.goals import GoalCalculate, GoalOut, GoalSet
from app.services.goal_calculator import GoalTargets
from app.services.goals import NutritionGoalService

router = APIRouter(prefix="/goals", tags=["goals"])


@router.get("")
async def get_goal(
    user: User = Depends(get_current_user),
    goals: NutritionGoalService = Depends(get_goal_service),
):
    return envelope(GoalOut.model_validate(await goals.get(user.id)))


@router.post("")
async def set_goal(
    payload: GoalSet,
    user: User = Depends(get_current_user),
    goals: NutritionGoalService = Depends(get_goal_service),
):
    goal = await goals.set(user.id, GoalTargets(**payload.model_dump()))
    return envelope(GoalOut.model_validate(goal), "goal saved")


@router.post("/calculate")
async def calculate_goal(
    payload: GoalCalculate,
    user: User = Depends(get_current_user),
    goals: NutritionGoalService = Depends(get_goal_service),
):
    overrides = payload.model_dump(exclude={"goal_type"}, exclude_none=True)
    goal = await goals.calculate(user.id, payload.goal_type, overrides)
    return envelope(GoalOut.model_validate(goal), "goal calculated")
