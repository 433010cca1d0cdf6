"""Basic tests to verify test DB setup."""

import pytest
from sqlalchemy import select, text

from shorturl.core.config import Settings
from shorturl.db.base import get_engine, init_db
from shorturl.models.url import ShortURL


@pytest.mark.asyncio
async def test_create_tables(test_db):
    """Verify the mapping table is created and usable."""
    result = await test_db.execute(text("SELECT name FROM sqlite_master WHERE type='table' AND name='shorturls'"))
    tables = [row[0] for row in result.fetchall()]
    assert "shorturls" in tables

    url = ShortURL(
        short_url="3NBE4XK",
        long_url="https://example.com",
        created_at="2024-05-01T12:00:00.000Z",
        expires_at="2024-05-31T12:00:00.000Z",
    )

    test_db.add(url)
    await test_db.commit()

    result = await test_db.execute(select(ShortURL).where(ShortURL.short_url == "3NBE4XK"))
    retrieved_url = result.scalars().first()

    assert retrieved_url is not None
    assert retrieved_url.id is not None
    assert retrieved_url.long_url == "https://example.com"
    assert retrieved_url.expires_at == "2024-05-31T12:00:00.000Z"


@pytest.mark.asyncio
async def test_table_layout(test_db):
    """Verify column names and types of the mapping table."""
    result = await test_db.execute(text("PRAGMA table_info('shorturls')"))
    columns = {row[1]: (row[2], row[5]) for row in result.fetchall()}

    assert set(columns) == {"id", "short_url", "long_url", "created_at", "expires_at"}
    assert columns["id"] == ("INTEGER", 1)
    for name in ("short_url", "long_url", "created_at", "expires_at"):
        assert columns[name][0] == "TEXT"


@pytest.mark.asyncio
async def test_short_url_has_no_index(test_db):
    """Only the primary key is indexed; short codes are not unique."""
    result = await test_db.execute(text("PRAGMA index_list('shorturls')"))
    assert result.fetchall() == []


@pytest.mark.asyncio
async def test_init_db_on_configured_engine():
    """The engine built from settings starts empty and gains the schema on init."""
    engine = get_engine(Settings(DATABASE_URL="sqlite+aiosqlite:///:memory:", LOG_TO_FILE=False))
    try:
        await init_db(engine)
        async with engine.connect() as conn:
            result = await conn.execute(text("SELECT count(*) FROM shorturls"))
            assert result.scalar_one() == 0
    finally:
        await engine.dispose()
