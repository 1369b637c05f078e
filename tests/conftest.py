"""API test fixtures.

Each test gets a fresh in-memory SQLite database; the app's ``get_db``
dependency is overridden to hand out sessions bound to it.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("CREATE_TABLES_ON_STARTUP", "false")
os.environ.setdefault("JWT_SECRET", "test-secret")

from collections.abc import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.core.db import create_tables, enable_sqlite_foreign_keys, get_db
from app.main import app


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    enable_sqlite_foreign_keys(engine)
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)


@pytest.fixture
async def db(session_factory) -> AsyncIterator[AsyncSession]:
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory) -> AsyncIterator[AsyncClient]:
    async def _get_test_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _get_test_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(client):
    """Register + login; returns (user dict, auth headers)."""

    async def _make(email: str = "alice@mailbox.org", password: str = "secret123", nickname: str = "alice"):
        res = await client.post(
            "/auth/register",
            json={"email": email, "password": password, "nickname": nickname},
        )
        assert res.status_code == 201, res.text
        res = await client.post("/auth/login", json={"email": email, "password": password})
        assert res.status_code == 200, res.text
        data = res.json()["data"]
        return data["user"], {"Authorization": f"Bearer {data['token']}"}

    return _make


@pytest.fixture
def make_food(client):
    async def _make(headers, name: str = "Apple", calories: float = 52, protein: float = 0.3,
                    carbohydrates: float = 14, fat: float = 0.2):
        res = await client.post(
            "/foods",
            json={
                "name": name,
                "calories": calories,
                "protein": protein,
                "carbohydrates": carbohydrates,
                "fat": fat,
            },
            headers=headers,
        )
        assert res.status_code == 201, res.text
        return res.json()["data"]

    return _make


@pytest.fixture
def make_meal(client):
    async def _make(headers, day: str = "2024-01-01", meal_type="breakfast"):
        res = await client.post("/meals", json={"date": day, "meal_type": meal_type}, headers=headers)
        assert res.status_code == 201, res.text
        return res.json()["data"]

    return _make
