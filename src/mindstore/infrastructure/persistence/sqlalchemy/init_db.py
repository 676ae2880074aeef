"""Database initialization utilities."""

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine

# Import models to register with Base.metadata
import mindstore.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from mindstore.domain.person import DEFAULT_ROLE_TABLE, Role
from mindstore.infrastructure.persistence.sqlalchemy.models.base import Base
from mindstore.infrastructure.persistence.sqlalchemy.repositories import (
    RoleRepositorySQLAlchemy,
)
from mindstore_config.settings import get_settings

logger = logging.getLogger(__name__)


def create_engine_from_settings() -> AsyncEngine:
    """Build an async engine for the configured database."""
    settings = get_settings()
    return create_async_engine(
        settings.database_url,
        echo=False,
        pool_pre_ping=True,
    )


async def create_tables(engine: Optional[AsyncEngine] = None) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    owns_engine = engine is None
    engine = engine or create_engine_from_settings()
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if owns_engine:
        await engine.dispose()
    logger.info("Database schema is up to date (missing tables created if needed)")


async def drop_tables(engine: Optional[AsyncEngine] = None) -> None:
    """
    Drop all database tables (USE WITH CAUTION!).

    This is primarily for testing and development reset scenarios.
    """
    owns_engine = engine is None
    engine = engine or create_engine_from_settings()
    logger.warning("Dropping all database tables...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    if owns_engine:
        await engine.dispose()
    logger.info("Database tables dropped successfully")


async def seed_roles(session: AsyncSession) -> list[Role]:
    """Insert the fixed USER and ADMIN roles if they are missing."""
    repo = RoleRepositorySQLAlchemy(session)
    roles = [
        await repo.save(Role(id=role_id, name=name))
        for name, role_id in DEFAULT_ROLE_TABLE.items()
    ]
    await session.commit()
    return roles


async def init_database(engine: Optional[AsyncEngine] = None) -> None:
    """Create missing tables and seed reference data."""
    owns_engine = engine is None
    engine = engine or create_engine_from_settings()

    logger.info("Initializing database...")
    await create_tables(engine)
    async with AsyncSession(engine, expire_on_commit=False) as session:
        await seed_roles(session)

    if owns_engine:
        await engine.dispose()
    logger.info("Database initialized successfully!")


async def reset_database(engine: Optional[AsyncEngine] = None) -> None:
    """Drop all tables, recreate them and seed reference data."""
    owns_engine = engine is None
    engine = engine or create_engine_from_settings()

    await drop_tables(engine)
    await init_database(engine)

    if owns_engine:
        await engine.dispose()
    logger.info("Database recreated successfully!")
