"""Exceptions for the URL shortener service layer.

This module contains the exception hierarchy for the service layer,
providing domain-specific exceptions that abstract underlying implementation details.
"""


class ServiceError(Exception):
    """Base exception for all service-level errors."""
    pass


class URLError(ServiceError):
    """Base exception for URL-related errors."""
    pass


class URLValidationError(URLError):
    """Request input failed validation checks."""
    pass


class MissingURLError(URLValidationError):
    """No URL was supplied to shorten."""

    def __init__(self, message: str = "Missing URL"):
        super().__init__(message)


class URLNotFoundError(URLError):
    """No mapping exists for the requested short code."""

    def __init__(self, message: str = "Short URL not found"):
        super().__init__(message)


class StoreError(ServiceError):
    """The mapping store failed to complete an operation.

    The message is the underlying storage error, unchanged.
    """
    pass
