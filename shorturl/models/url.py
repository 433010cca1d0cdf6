"""URL shortener data models.

This module defines the ShortURL model for storing short code mappings in the database.
"""
from typing import Optional

from sqlalchemy import Text
from sqlmodel import Field, SQLModel


class ShortURLBase(SQLModel):
    """Base model for short URL data."""

    short_url: str = Field(
        sa_type=Text,
        description="Short code derived from the long URL (not unique)"
    )
    long_url: str = Field(
        sa_type=Text,
        description="The original URL, stored verbatim"
    )
    created_at: str = Field(
        sa_type=Text,
        description="ISO-8601 timestamp of creation"
    )
    expires_at: Optional[str] = Field(
        default=None,
        sa_type=Text,
        description="ISO-8601 timestamp after which the mapping is considered expired"
    )


class ShortURL(ShortURLBase, table=True):
    """
    Short URL model for storing code mappings in the database.

    Rows are append-only. The short_url column carries neither an index
    nor a uniqueness constraint, so the same code may appear on several
    rows; lookups return whichever row the engine yields first.
    """

    __tablename__ = "shorturls"

    id: Optional[int] = Field(default=None, primary_key=True)


class ShortURLCreate(ShortURLBase):
    """Schema for creating a new short URL."""
    pass
