"""Environment-based configuration using pydantic-settings.

Example:
    >>> from weatherflow.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.http.base_url
    'http://echo.jsontest.com'

    # Or with environment variables:
    # WEATHERFLOW_HTTP_TIMEOUT=5
    # WEATHERFLOW_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, PositiveFloat, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class HttpSettings(BaseSettings):
    """Fetch collaborator configuration."""

    model_config = SettingsConfigDict(
        env_prefix="WEATHERFLOW_HTTP_",
        extra="ignore",
    )

    base_url: str = Field(default="http://echo.jsontest.com", description="Echo endpoint base URL")
    timeout: PositiveFloat = Field(default=10.0, description="Request timeout in seconds")
    user_agent: str = "weatherflow/1.0"

    @field_validator("base_url")
    @classmethod
    def _strip_slash(cls, v: str) -> str:
        return v.rstrip("/")


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="WEATHERFLOW_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json", "none"] = "console"

    @field_validator("level", mode="before")
    @classmethod
    def _upper(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class WeatherflowSettings(BaseSettings):
    """Root settings, loaded from WEATHERFLOW_* environment variables and .env."""

    model_config = SettingsConfigDict(
        env_prefix="WEATHERFLOW_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    error_domain: str = Field(default="weatherflow", min_length=1, description="Domain tag on ErrorDescriptor")
    http: HttpSettings = Field(default_factory=HttpSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> WeatherflowSettings:
    """Get the global settings instance (cached)."""
    return WeatherflowSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
