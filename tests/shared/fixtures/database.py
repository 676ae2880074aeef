"""
In-memory SQLite fixtures for integration tests.

Every test gets a fresh database: tables are created, the USER and ADMIN
roles are seeded and the schema is dropped again afterwards. StaticPool
keeps the single in-memory connection alive for the whole test.

Usage:
    async def test_something(db_session):
        repo = SomeRepository(db_session)
        await repo.save(entity)
"""

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from mindstore.infrastructure.persistence.sqlalchemy.init_db import (
    create_tables,
    drop_tables,
    seed_roles,
)

SQLITE_MEMORY_URL = "sqlite+aiosqlite://"


@pytest_asyncio.fixture
async def async_engine():
    engine = create_async_engine(
        SQLITE_MEMORY_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_tables(engine)

    yield engine

    await drop_tables(engine)
    await engine.dispose()


@pytest_asyncio.fixture
async def session_maker(async_engine):
    maker = async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with maker() as session:
        await seed_roles(session)
    return maker


@pytest_asyncio.fixture
async def db_session(session_maker):
    """Provide an isolated session on a freshly seeded database."""
    async with session_maker() as session:
        yield session

        # Rollback any uncommitted changes
        await session.rollback()
