import logging

from app.core.errors import AuthenticationError, ConflictError, NotFoundError
from app.core.security import create_access_token, hash_password, verify_password
from app.models.user import User
from app.repositories.users import DUPLICATE_EMAIL, UserRepository

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("nickname", "gender", "age", "height_cm", "weight_kg", "activity_level")


class UserService:
    def __init__(self, users: UserRepository):
        self.users = users

    async def register(self, *, email: str, password: str, nickname: str) -> User:
        email = email.strip().lower()
        if await self.users.get_by_email(email):
            raise ConflictError(DUPLICATE_EMAIL)

        user = await self.users.add(
            User(email=email, password_hash=hash_password(password), nickname=nickname)
        )
        logger.info("registered user %s", user.id)
        return user

    async def login(self, *, email: str, password: str) -> tuple[User, str]:
        user = await self.users.get_by_email(email.strip().lower())
        if not user or not verify_password(password, user.password_hash):
            logger.warning("rejected login for %s", email)
            raise AuthenticationError("invalid email or password")

        return user, create_access_token(user)

    async def get_profile(self, user_id: int) -> User:
        user = await self.users.get(user_id)
        if not user:
            raise NotFoundError("user not found")
        return user

    async def update_profile(self, user_id: int, changes: dict) -> User:
        user = await self.get_profile(user_id)
        for field, value in changes.items():
            if field in PROFILE_FIELDS and value is not None:
                setattr(user, field, value)
        return await self.users.save(user)
