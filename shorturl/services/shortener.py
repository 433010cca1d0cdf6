"""URL shortening service for the URL shortener application.

This module contains the ShortenedURLService class which implements business logic
for URL shortening and retrieval.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from shorturl.core.config import settings
from shorturl.core.shortcode import generate_short_code
from shorturl.db.session import db_transaction
from shorturl.models.url import ShortURL, ShortURLCreate
from shorturl.repositories.base import RepositoryError, storage_error_message
from shorturl.repositories.url_repository import URLRepository
from shorturl.services.exceptions import (
    MissingURLError,
    StoreError,
    URLNotFoundError,
)

logger = logging.getLogger(__name__)


def format_timestamp(moment: datetime) -> str:
    """Render a datetime as a UTC ISO-8601 string with millisecond precision.

    >>> format_timestamp(datetime(2024, 5, 1, 12, tzinfo=timezone.utc))
    '2024-05-01T12:00:00.000Z'
    """
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ShortenedURLService:
    """
    Service for URL shortening business logic.

    This service derives short codes, stamps creation and expiration times,
    and resolves codes back to their long URLs.
    """

    def __init__(
        self,
        url_repository: URLRepository,
        code_length: Optional[int] = None,
        expiration_days: Optional[int] = None,
    ):
        """
        Initialize the URL shortening service.

        Args:
            url_repository: Repository for URL data access
            code_length: Short code length, defaults to settings.URL_CODE_LENGTH
            expiration_days: Lifetime recorded on new mappings, defaults to settings.EXPIRATION_DAYS
        """
        self.url_repository = url_repository
        self.code_length = code_length or settings.URL_CODE_LENGTH
        self.expiration_days = expiration_days or settings.EXPIRATION_DAYS

    def _now(self) -> datetime:
        return datetime.now(timezone.utc)

    async def create_short_url(self, db: AsyncSession, long_url: Optional[str]) -> ShortURL:
        """
        Shorten a URL and store the mapping.

        Every call inserts a new row, even when the same URL was shortened before.

        Args:
            db: Database session
            long_url: The URL to shorten, stored verbatim

        Returns:
            ShortURL: The stored mapping

        Raises:
            MissingURLError: If no URL was supplied
            StoreError: If the insert fails
        """
        if not long_url:
            raise MissingURLError()

        short_url = generate_short_code(long_url, self.code_length)
        now = self._now()

        url_data = ShortURLCreate(
            short_url=short_url,
            long_url=long_url,
            created_at=format_timestamp(now),
            expires_at=format_timestamp(now + timedelta(days=self.expiration_days)),
        )

        try:
            url = await self._insert(db=db, url_data=url_data)
        except RepositoryError as e:
            logger.error(f"Error creating short URL: {e}")
            raise StoreError(str(e)) from e
        except SQLAlchemyError as e:
            message = storage_error_message(e)
            logger.error(f"Error committing short URL: {message}")
            raise StoreError(message) from e

        logger.info(f"Created short URL {short_url} for {long_url}")
        return url

    @db_transaction(db_param_name="db")
    async def _insert(self, db: AsyncSession, url_data: ShortURLCreate) -> ShortURL:
        return await self.url_repository.create_short_url(db, url_data)

    async def get_url_for_redirect(self, db: AsyncSession, short_url: str) -> ShortURL:
        """
        Resolve a short code to its stored mapping.

        Expiration is not checked.

        Args:
            db: Database session
            short_url: The short code to look up

        Returns:
            ShortURL: The first mapping stored under this code

        Raises:
            URLNotFoundError: If no mapping uses this code
            StoreError: If the lookup fails
        """
        try:
            url = await self.url_repository.get_by_short_url(db, short_url)
        except RepositoryError as e:
            logger.error(f"Error retrieving URL for redirect: {e}")
            raise StoreError(str(e)) from e

        if url is None:
            raise URLNotFoundError()

        return url
