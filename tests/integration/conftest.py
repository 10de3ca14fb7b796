"""Database fixtures for repository tests.

These run the real repositories against a real engine. TEST_DATABASE_URL
selects the database; without it an in-memory SQLite database is used, so
the suite needs no external services.
"""

import os
from collections.abc import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import NullPool, StaticPool
from sqlmodel import SQLModel

from src.checkinn import models  # noqa: F401 - registers every table on the metadata

DEFAULT_TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture(scope="function")
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Create a test engine with a fresh schema."""
    url = os.environ.get("TEST_DATABASE_URL", DEFAULT_TEST_DATABASE_URL)
    if url.startswith("sqlite"):
        # One shared connection, so every session sees the same in-memory database
        test_engine = create_async_engine(
            url, poolclass=StaticPool, connect_args={"check_same_thread": False}
        )
    else:
        test_engine = create_async_engine(url, poolclass=NullPool)

    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)

    yield test_engine

    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Provide an async session for database operations.

    The session does not auto-commit. Tests call `await session.commit()`
    to persist the rows they add.
    """
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session
