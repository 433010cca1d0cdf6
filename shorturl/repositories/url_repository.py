"""URL Repository for the URL shortener service.

This module provides the URLRepository class for database operations related to ShortURL models.
Following the Repository pattern, it abstracts database interactions for the mapping store.
"""

from typing import Optional, Union, Dict, Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError

from shorturl.models.url import ShortURL, ShortURLCreate
from shorturl.repositories.base import BaseRepository, RepositoryError, storage_error_message


class URLRepository(BaseRepository[ShortURL, ShortURLCreate]):
    """
    Repository for ShortURL model database operations.

    Inserts never look for an existing row with the same code, so repeated
    submissions of one URL accumulate duplicate rows.
    """

    def __init__(self):
        """Initialize the repository with the ShortURL model type."""
        super().__init__(ShortURL)

    async def create_short_url(
        self,
        db: AsyncSession,
        data: Union[ShortURLCreate, Dict[str, Any]]
    ) -> ShortURL:
        """
        Append a new short URL row.

        Args:
            db: Database session
            data: Short URL data (either as a ShortURLCreate model or dictionary)

        Returns:
            The created ShortURL entity, with its assigned id

        Raises:
            RepositoryError: On database errors
        """
        return await self.create(db, data)

    async def get_by_short_url(self, db: AsyncSession, short_url: str) -> Optional[ShortURL]:
        """
        Find a mapping by its short code.

        When several rows share the code, the first one the engine returns wins.

        Args:
            db: Database session
            short_url: The short code to look up

        Returns:
            The ShortURL if found, None otherwise

        Raises:
            RepositoryError: On database errors
        """
        try:
            query = select(self.model_type).where(self.model_type.short_url == short_url).limit(1)
            result = await db.execute(query)
            return result.scalars().first()
        except SQLAlchemyError as e:
            raise RepositoryError(storage_error_message(e)) from e
