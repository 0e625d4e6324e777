# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.API_PORT)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# Every setting has a default, so the service starts with no configuration
# at all on 127.0.0.1:3030 with the bundled seed questions.
# =============================================================================

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Seed document shipped with the core package
DEFAULT_SEED_FILE = Path(__file__).resolve().parent.parent / "core" / "data" / "questions.json"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings are accessed via the global `settings` instance.
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging, auto-reload)"
    )

    API_HOST: str = Field(
        default="127.0.0.1",
        description="Host to bind the API server to"
    )

    API_PORT: int = Field(
        default=3030,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    # -------------------------------------------------------------------------
    # CORS
    # -------------------------------------------------------------------------
    # Comma-separated strings that get parsed into lists

    CORS_ORIGINS: str = Field(
        default="*",
        description="Allowed CORS origins (comma-separated, * for any)"
    )

    CORS_ALLOW_METHODS: str = Field(
        default="PUT,PATCH,DELETE,POST,GET",
        description="Allowed CORS methods (comma-separated)"
    )

    CORS_ALLOW_HEADERS: str = Field(
        default="content-type",
        description="Allowed CORS request headers (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Store
    # -------------------------------------------------------------------------

    SEED_FILE: Path = Field(
        default=DEFAULT_SEED_FILE,
        description="JSON document the store is seeded from at startup"
    )

    # -------------------------------------------------------------------------
    # Error Responses
    # -------------------------------------------------------------------------

    LEGACY_STATUS_CODES: bool = Field(
        default=True,
        description=(
            "Report 'question not found' and 'bad integer parameter' as 416 "
            "as earlier releases did. When false, 404 and 400 are used."
        )
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:3000, https://myapp.com" -> ["http://localhost:3000", "https://myapp.com"]
        """
        return _split(self.CORS_ORIGINS)

    @property
    def cors_methods_list(self) -> list[str]:
        """Example: "put, get" -> ["PUT", "GET"]"""
        return [method.upper() for method in _split(self.CORS_ALLOW_METHODS)]

    @property
    def cors_headers_list(self) -> list[str]:
        return [header.lower() for header in _split(self.CORS_ALLOW_HEADERS)]


def _split(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.

    Returns:
        Settings: The application settings instance
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
