"""Application configuration module.

This module contains settings for the URL shortener service,
loaded from environment variables with appropriate defaults.
"""

from __future__ import annotations

from typing import Any
from enum import Enum
from pathlib import Path
import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Set up basic logger for config module
logger = logging.getLogger(__name__)

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent.parent.parent

DEFAULT_PORT = 3000
DEFAULT_NAME = "World"


class EnvironmentType(str, Enum):
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """Service settings loaded from environment variables with defaults.

    Settings are loaded from environment variables, with fallback to
    values in .env file if present, and finally to the default values
    specified here.
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment setting
    ENVIRONMENT: EnvironmentType = EnvironmentType.DEVELOPMENT

    # App Information
    APP_NAME: str = "shorturl"
    APP_VERSION: str = "0.1.0"
    APP_DESCRIPTION: str = "Hash-based URL shortening service"
    DEBUG: bool = False

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = DEFAULT_PORT
    NAME: str = DEFAULT_NAME  # Greeting name for the root endpoint

    # Short code generation
    URL_CODE_LENGTH: int = Field(default=7, ge=1)

    # Expiration is recorded on every mapping but never enforced
    EXPIRATION_DAYS: int = Field(default=30, ge=1)

    # Mapping store. The default is an in-memory database scoped to the process.
    DATABASE_URL: str = "sqlite+aiosqlite:///:memory:"
    DB_ECHO: bool = False

    # Logging configuration
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    LOG_FILENAME: str = "app.log"
    LOG_TO_FILE: bool = True
    LOG_ROTATION: str = "10 MB"
    LOG_RETENTION: str = "7 days"
    LOG_FORMAT: str = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {message}"
    LOG_JSON: bool = True
    REQUEST_LOGGING_ENABLED: bool = True  # Enable request logging middleware

    # Validators
    @field_validator("PORT", mode="before")
    def validate_port(cls, v: Any) -> int:
        """Fall back to the default port when the value is empty or unparsable."""
        if v is None or v == "":
            return DEFAULT_PORT
        try:
            port = int(v)
        except (ValueError, TypeError):
            logger.warning(f"Invalid PORT value {v!r}, using {DEFAULT_PORT}")
            return DEFAULT_PORT
        return port or DEFAULT_PORT

    @field_validator("NAME", mode="before")
    def validate_name(cls, v: Any) -> str:
        """Convert an empty greeting name to the default."""
        if not v:
            return DEFAULT_NAME
        return v

    @property
    def is_memory_database(self) -> bool:
        """Whether the mapping store lives in process memory."""
        return self.DATABASE_URL.startswith("sqlite") and (
            ":memory:" in self.DATABASE_URL or self.DATABASE_URL.rstrip("/").endswith(":")
        )


# Create a singleton instance of the settings
settings = Settings()
