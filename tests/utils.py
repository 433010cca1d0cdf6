"""Test utilities for URL shortener tests."""

import random
import string
from datetime import datetime, timezone
from typing import Dict, Any, Optional

from shorturl.models.url import ShortURL


def random_string(length: int = 10) -> str:
    """Generate a random alphanumeric string."""
    return ''.join(random.choice(string.ascii_letters + string.digits) for _ in range(length))


def random_url() -> str:
    """Generate a random URL for testing."""
    domain = f"{random_string(8)}.com"
    path = random_string(12)
    return f"https://{domain}/{path}"


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp with a trailing Z."""
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def create_test_url_data(
    long_url: Optional[str] = None,
    short_url: Optional[str] = None,
    created_at: Optional[str] = None,
    expires_at: Optional[str] = None,
) -> Dict[str, Any]:
    """Create test data dict for a ShortURL."""
    return {
        "long_url": long_url or random_url(),
        "short_url": short_url or random_string(7),
        "created_at": created_at or datetime.now(timezone.utc).isoformat(),
        "expires_at": expires_at,
    }


async def create_test_url(
    db,
    long_url: Optional[str] = None,
    short_url: Optional[str] = None,
    created_at: Optional[str] = None,
    expires_at: Optional[str] = None,
) -> ShortURL:
    """Create and persist a test ShortURL in the database."""
    url = ShortURL(**create_test_url_data(
        long_url=long_url,
        short_url=short_url,
        created_at=created_at,
        expires_at=expires_at,
    ))
    db.add(url)
    await db.flush()
    await db.refresh(url)
    return url
