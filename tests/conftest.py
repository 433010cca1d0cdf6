"""Test fixtures for the URL shortener service."""

import os

# Settings are read at import time, so the test environment must be in place first
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("LOG_TO_FILE", "false")

import httpx
import pytest
import pytest_asyncio
from typing import AsyncGenerator, Generator
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from shorturl.core.config import Settings
from shorturl.main import create_app
from shorturl.repositories.url_repository import URLRepository
from shorturl.services.shortener import ShortenedURLService
# Import models to ensure they're registered with SQLModel metadata
from shorturl.models.url import ShortURL  # noqa: F401


# Test database URL - using SQLite in-memory
TEST_SQLALCHEMY_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_engine():
    """Create a fresh in-memory SQLite engine for each test."""
    engine = create_async_engine(
        TEST_SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False
    )

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_db(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    session_factory = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False
    )

    async with session_factory() as session:
        yield session


@pytest.fixture
def url_repository() -> URLRepository:
    """Return URL repository instance."""
    return URLRepository()


@pytest.fixture
def shortener_service(url_repository) -> ShortenedURLService:
    """Return a shortening service backed by the real repository."""
    return ShortenedURLService(url_repository=url_repository, code_length=7, expiration_days=30)


@pytest.fixture
def test_settings() -> Settings:
    """Settings for an isolated application instance."""
    return Settings(
        ENVIRONMENT="testing",
        DATABASE_URL=TEST_SQLALCHEMY_DATABASE_URL,
        LOG_TO_FILE=False,
        NAME="World",
    )


@pytest.fixture
def test_app(test_settings) -> FastAPI:
    """Create a FastAPI app with its own in-memory store."""
    return create_app(test_settings)


@pytest.fixture
def client(test_app) -> Generator[TestClient, None, None]:
    """Return a TestClient; entering it runs the app lifespan."""
    with TestClient(test_app) as test_client:
        yield test_client
    test_app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def async_client(test_app) -> AsyncGenerator[httpx.AsyncClient, None]:
    """Return an httpx client on the test's event loop, inside the app lifespan.

    ASGITransport does not run the lifespan itself, so the store is opened
    and released around the client here.
    """
    async with test_app.router.lifespan_context(test_app):
        transport = httpx.ASGITransport(app=test_app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
