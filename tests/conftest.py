"""Shared fixtures: app wired to an in-memory SQLite database."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app import models  # noqa: F401 - register all tables on Base.metadata
from app.db.base import Base
from app.db.session import get_db
from app.main import create_application


@pytest_asyncio.fixture
async def db_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_maker(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def client(session_maker):
    async def override_get_db():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    application = create_application()
    application.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=application), base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def exercise(client):
    response = await client.post("/api/v1/exercises", json={"name": "Bench Press"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def kg_sets():
    return [
        {"weight": 100, "reps": 5, "unit": "kg"},
        {"weight": 110, "reps": 5, "unit": "kg"},
        {"weight": 120, "reps": 5, "unit": "kg"},
    ]
