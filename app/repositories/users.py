from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from app.core.errors import ConflictError
from app.models.user import User
from app.repositories.base import Repository

DUPLICATE_EMAIL = "Email already registered"


class UserRepository(Repository[User]):
    model = User

    async def add(self, obj: User) -> User:
        try:
            return await super().add(obj)
        except IntegrityError:
            await self.db.rollback()
            raise ConflictError(DUPLICATE_EMAIL)

    async def get_by_email(self, email: str) -> User | None:
        res = await self.db.execute(select(User).where(User.email == email))
        return res.scalar_one_or_none()
