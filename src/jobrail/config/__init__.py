"""Configuration management using pydantic-settings."""

from .settings import (
    ConversionSettings,
    JobrailSettings,
    LoggingSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "ConversionSettings",
    "JobrailSettings",
    "LoggingSettings",
    "clear_settings_cache",
    "get_settings",
]
