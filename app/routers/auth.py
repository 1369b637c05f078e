from fastapi import APIRouter, Depends, status

from app.core.deps import get_user_service
from app.core.responses import envelope
from app.schemas.auth import LoginOut, LoginRequest, RegisterRequest
from app.schemas.user import UserOut
from app.services.users import UserService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", status_code=201)
async def register(payload: RegisterRequest, users: UserService = Depends(get_user_service)):
    user = await users.register(
        email=payload.email,
        password=payload.password,
        nickname=payload.nickname,
    )
    return envelope(UserOut.model_validate(user), "registered", status.HTTP_201_CREATED)


@router.post("/login")
async def login(payload: LoginRequest, users: UserService = Depends(get_user_service)):
    user, token = await users.login(email=payload.email, password=payload.password)
    return envelope(LoginOut(user=UserOut.model_validate(user), token=token), "logged in")
