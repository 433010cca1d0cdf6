"""API request and response schemas.

This module contains Pydantic models for API request validation
and response serialization.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict


class GenerateRequest(BaseModel):
    """Request schema for shortening a URL.

    ``url`` is optional at the schema level so that a missing value is
    reported as a 400 by the handler rather than a 422.
    """
    url: Optional[str] = None


class GenerateResponse(BaseModel):
    """Response schema for a stored mapping."""
    model_config = ConfigDict(from_attributes=True)

    short_url: str
    created_at: str
    expires_at: Optional[str] = None
    long_url: str


class ErrorResponse(BaseModel):
    """Schema for error responses."""
    error: str


class ValidationErrorResponse(ErrorResponse):
    """Schema for request validation failures."""
    errors: List[Any] = []
