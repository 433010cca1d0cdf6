"""Repositories for the URL shortener service."""

from shorturl.repositories.base import BaseRepository, RepositoryError
from shorturl.repositories.url_repository import URLRepository

__all__ = ["BaseRepository", "RepositoryError", "URLRepository"]
