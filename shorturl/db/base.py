"""Database base configuration for SQLAlchemy with SQLModel.

This module provides base database configuration for async SQLAlchemy with SQLModel.
It includes:
- Engine configuration
- Schema creation
- Session factory setup

No engine is created at import time. The application owns the engine:
it is built on startup and disposed on shutdown (see ``shorturl.main``).
"""

from typing import AsyncGenerator, Dict, Optional
import logging
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from shorturl.core.config import Settings, settings as default_settings

# Import models to ensure they're registered with SQLModel metadata
from shorturl.models.url import ShortURL  # noqa: F401

logger = logging.getLogger(__name__)


def get_engine_config(settings: Settings) -> Dict:
    """Get engine configuration for the configured database URL.

    An in-memory SQLite database only lives as long as its connection,
    so every session must share a single connection.

    Returns:
        Dict: Engine configuration parameters.
    """
    config: Dict = {"echo": settings.DB_ECHO}
    if settings.is_memory_database:
        config["poolclass"] = StaticPool
        config["connect_args"] = {"check_same_thread": False}
    elif settings.DATABASE_URL.startswith("sqlite"):
        config["connect_args"] = {"check_same_thread": False}
    else:
        config["pool_pre_ping"] = True
    return config


def get_engine(settings: Optional[Settings] = None) -> AsyncEngine:
    """Create and configure an async SQLAlchemy engine.

    Returns:
        AsyncEngine: Configured SQLAlchemy async engine instance.
    """
    settings = settings or default_settings
    engine_url = settings.DATABASE_URL

    logger.info(f"Creating database engine with URL: {engine_url}")

    return create_async_engine(engine_url, **get_engine_config(settings))


def get_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    """Build the session factory bound to an engine."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def init_db(engine: AsyncEngine) -> None:
    """Create the mapping table if it does not exist yet."""
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Database schema initialized")


@asynccontextmanager
async def get_session(session_factory: async_sessionmaker) -> AsyncGenerator[AsyncSession, None]:
    """Get async session with proper error handling and cleanup.

    Yields:
        AsyncSession: SQLAlchemy async session
    """
    session = session_factory()
    try:
        yield session
    finally:
        await session.close()
