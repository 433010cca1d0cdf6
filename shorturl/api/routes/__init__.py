"""Routes package initialization.

This module exports the route collection for the application.
"""

from fastapi import APIRouter

from shorturl.api.routes import shortener, redirect, health

# Create root router
api_router = APIRouter()

api_router.include_router(health.router)
api_router.include_router(shortener.router)

# The redirect route matches any single path segment, so it goes last
# to keep /health from being treated as a short code.
api_router.include_router(redirect.router)

__all__ = ["api_router"]
