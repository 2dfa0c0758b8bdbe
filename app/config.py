# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.listen_address)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# Nothing is required: every value has a development-friendly default.
# =============================================================================

from functools import lru_cache
from typing import Literal
from urllib.parse import urlsplit

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_HOST = "0.0.0.0"


def parse_listen_addr(value: str) -> tuple[str, int]:
    """
    Parse a listen address into a (host, port) pair.

    Accepts "host:port", ":port", "[::1]:port" and "http://host:port".
    An empty host means all interfaces.

    Raises:
        ValueError: If the port is missing or invalid, or the scheme isn't http
    """
    raw = value.strip()
    if "://" not in raw:
        raw = f"http://{raw}"

    parts = urlsplit(raw)
    if parts.scheme != "http":
        raise ValueError(f"Unsupported scheme in listen address: {value!r}")

    try:
        port = parts.port
    except ValueError as e:
        raise ValueError(f"Invalid port in listen address: {value!r}") from e
    if port is None:
        raise ValueError(f"Listen address must include a port: {value!r}")

    host = parts.hostname or DEFAULT_HOST
    return host, port


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
        description="Enable debug mode (verbose logging)"
    )

    # -------------------------------------------------------------------------
    # Server Settings
    # -------------------------------------------------------------------------

    API_HOST: str = Field(
        default=DEFAULT_HOST,
        description="Host to bind the API server to"
    )

    API_PORT: int = Field(
        default=8000,
        ge=0,
        le=65535,
        description="Port for the API server (0 picks a free port)"
    )

    # Overrides API_HOST/API_PORT when set
    LISTEN_ADDR: str | None = Field(
        default=None,
        description="Listen address override, e.g. 127.0.0.1:8080 or http://[::1]:8080"
    )

    # -------------------------------------------------------------------------
    # Security
    # -------------------------------------------------------------------------

    # CORS origins (comma-separated string that gets parsed)
    CORS_ORIGINS: str = Field(
        default="*",
        description="Allowed CORS origins (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
        # .env may hold values for other tools
        extra="ignore",
    )

    @field_validator("LISTEN_ADDR")
    @classmethod
    def validate_listen_addr(cls, value: str | None) -> str | None:
        if value is not None:
            parse_listen_addr(value)
        return value

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def listen_address(self) -> tuple[str, int]:
        """
        Resolve the (host, port) the server should bind.

        LISTEN_ADDR wins over API_HOST/API_PORT.
        """
        if self.LISTEN_ADDR:
            return parse_listen_addr(self.LISTEN_ADDR)
        return self.API_HOST, self.API_PORT

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:3000, https://myapp.com" -> ["http://localhost:3000", "https://myapp.com"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
