"""API dependencies for FastAPI.

This module provides dependency injection functions for FastAPI endpoints
to access settings, repositories and service instances.
"""

from fastapi import Depends, Request

from shorturl.core.config import Settings
from shorturl.repositories.url_repository import URLRepository
from shorturl.services.shortener import ShortenedURLService


def get_settings(request: Request) -> Settings:
    """Get the settings the running application was created with."""
    return request.app.state.settings


async def get_url_repository():
    """Get an instance of the URL repository."""
    return URLRepository()


async def get_shortener_service(
    url_repo: URLRepository = Depends(get_url_repository),
    settings: Settings = Depends(get_settings),
) -> ShortenedURLService:
    """Get an instance of the URL shortening service."""
    return ShortenedURLService(
        url_repository=url_repo,
        code_length=settings.URL_CODE_LENGTH,
        expiration_days=settings.EXPIRATION_DAYS,
    )
