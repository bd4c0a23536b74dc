"""Shared fixtures: an in-memory SQLite database per test and an API client bound to it."""
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import gymlog.models  # noqa: F401
from gymlog.db.database import Base, enable_sqlite_foreign_keys, get_db
from gymlog.models.enums import (
    CompoundOrIsolation,
    DynamicOrStatic,
    UpperOrLower,
)
from gymlog.models.exercise import Exercise
from gymlog.models.workout import Workout


@pytest_asyncio.fixture
async def async_engine():
    engine = enable_sqlite_foreign_keys(create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    ))
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_maker(async_engine):
    return async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def async_db_session(session_maker) -> AsyncSession:
    async with session_maker() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_maker):
    """HTTP client for the app, with ``get_db`` pointed at the test database."""
    from gymlog.main import app

    async def override_get_db():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


def make_exercise(name: str, **overrides) -> Exercise:
    fields = {
        "dynamic_or_static": DynamicOrStatic.DYNAMIC,
        "upper_or_lower": UpperOrLower.UPPER,
        "compound_or_isolation": CompoundOrIsolation.COMPOUND,
    }
    fields.update(overrides)
    return Exercise(name=name, **fields)


@pytest_asyncio.fixture
async def five_workouts(async_db_session: AsyncSession) -> list[Workout]:
    """Workouts with ids 1..5."""
    workouts = [Workout(name=f"Workout {i}", active=i % 2 == 1) for i in range(1, 6)]
    async_db_session.add_all(workouts)
    await async_db_session.commit()
    return workouts


@pytest.fixture
def exercise_factory():
    return make_exercise
