"""Configuration management using pydantic-settings."""

from .settings import (
    HttpSettings,
    LoggingSettings,
    WeatherflowSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "HttpSettings",
    "LoggingSettings",
    "WeatherflowSettings",
    "clear_settings_cache",
    "get_settings",
]
