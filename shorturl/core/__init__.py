"""Core module for the URL shortener service."""

from shorturl.core.config import settings
from shorturl.core.shortcode import generate_short_code

__all__ = ["settings", "generate_short_code"]
