from fastapi import APIRouter, Depends

from app.core.deps import get_current_user, get_user_service
from app.core.responses import envelope
from app.models.user import User
from app.schemas.user import ProfileUpdate, UserOut
from app.services.users import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/profile")
async def get_profile(user: User = Depends(get_current_user)):
    return envelope(UserOut.model_validate(user))


@router.put("/profile")
async def update_profile(
    payload: ProfileUpdate,
    user: User = Depends(get_current_user),
    users: UserService = Depends(get_user_service),
):
    updated = await users.update_profile(user.id, payload.model_dump(exclude_unset=True))
    return envelope(UserOut.model_validate(updated), "profile updated")
