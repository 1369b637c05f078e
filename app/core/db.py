from collections.abc import AsyncIterator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from app.core.config import settings


# largest value an INTEGER primary key can hold
MAX_ID = 2**63 - 1


class Base(DeclarativeBase):
    pass


def enable_sqlite_foreign_keys(engine) -> None:
    # SQLite ignores ON DELETE CASCADE unless the pragma is set per connection
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine.sync_engine, "connect")
    def _set_pragma(dbapi_conn, _record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


engine = create_async_engine(settings.DATABASE_URL, future=True)
enable_sqlite_foreign_keys(engine)

SessionLocal = async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)


async def get_db() -> AsyncIterator[AsyncSession]:
    async with SessionLocal() as session:
        yield session


async def create_tables(bind=engine) -> None:
    # imported for their side effect of registering tables on Base.metadata
    from app.models import food, food_record, meal_record, nutrition_goal, user  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
