"""
Data models for the URL shortener service.

This module imports and exports all SQLModel models used in the service.
"""

# First import SQLModel itself to ensure metadata is initialized
from sqlmodel import SQLModel

from shorturl.models.url import (
    ShortURL,
    ShortURLBase,
    ShortURLCreate,
)

__all__ = [
    "SQLModel",
    "ShortURL",
    "ShortURLBase",
    "ShortURLCreate",
]
