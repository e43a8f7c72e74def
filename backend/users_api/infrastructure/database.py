"""Database Session Manager — async connection pool with automatic rollback.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Connection pool uses pool_pre_ping for stale connection detection
    - Exceptions escaping a session propagate unchanged; mapping to client errors
      happens where the failing statement runs (services/)
    - One manager per application, held on app.state.db (no module-level singleton)

Design Decisions:
    - Manager created in the FastAPI lifespan and injected through get_db, so tests
      swap it by assigning app.state.db or overriding get_db
    - expire_on_commit=False: prevents lazy-load issues in async context
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker,
)


class DatabaseSessionManager:
    """Owns the engine for the process lifetime and hands out sessions."""

    def __init__(
        self, database_url: str, pool_size: int = 5, max_overflow: int = 10,
    ):
        self.engine: AsyncEngine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
            pool_recycle=3600,
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_engine(cls, engine: AsyncEngine) -> "DatabaseSessionManager":
        """Wrap an engine built elsewhere (test fixtures, scripts)."""
        manager = cls.__new__(cls)
        manager.engine = engine
        manager._session_factory = async_sessionmaker(
            engine, class_=AsyncSession, expire_on_commit=False,
        )
        return manager

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def close(self) -> None:
        await self.engine.dispose()


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    manager: DatabaseSessionManager | None = getattr(request.app.state, "db", None)
    if manager is None:
        raise RuntimeError("Database not initialized")
    async with manager.session() as session:
        yield session
