"""API test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with the users table
    - app.state.db points at the test engine, so get_db yields test sessions

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - StaticPool: every session shares the one in-memory connection
    - App built through create_app(settings): same wiring as production minus lifespan
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from users_api.config import Settings
from users_api.db.base import Base
from users_api.infrastructure.database import DatabaseSessionManager
from users_api.main import create_app
from users_api.models.user import User


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_db(test_engine):
    factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )
    async with factory() as session:
        yield session


@pytest.fixture
def settings():
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:", _env_file=None,
    )


@pytest.fixture
def app(settings, test_engine):
    application = create_app(settings)
    application.state.db = DatabaseSessionManager.from_engine(test_engine)
    return application


@pytest.fixture
async def client(app):
    """FastAPI test client backed by the in-memory database."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def count_users(test_db):
    """Return an async callable counting rows in users."""
    async def _count() -> int:
        result = await test_db.execute(select(func.count()).select_from(User))
        return result.scalar_one()
    return _count
