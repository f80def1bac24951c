"""Environment-based configuration using pydantic-settings.

Example:
    >>> from jobrail.config import get_settings
    >>> get_settings().conversion.rate
    0.91
    
    # Or with environment variables:
    # JOBRAIL_CONVERSION_RATE=0.93
    # JOBRAIL_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, NonNegativeFloat, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConversionSettings(BaseSettings):
    """Currency conversion used by CurrencyConverter."""
    
    model_config = SettingsConfigDict(
        env_prefix="JOBRAIL_CONVERSION_",
        extra="ignore",
    )
    
    rate: NonNegativeFloat = Field(default=0.91, description="Units of target currency per unit of source")
    source_currency: str = "USD"
    target_currency: str = "EUR"
    
    @field_validator("source_currency", "target_currency", mode="before")
    @classmethod
    def _upper(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v
    
    @computed_field
    @property
    def pair(self) -> str:
        """Currency pair label, e.g. USD/EUR."""
        return f"{self.source_currency}/{self.target_currency}"


class LoggingSettings(BaseSettings):
    """Logging configuration."""
    
    model_config = SettingsConfigDict(
        env_prefix="JOBRAIL_LOG_",
        extra="ignore",
    )
    
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json", "none"] = "console"
    colors: bool | None = None
    
    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class JobrailSettings(BaseSettings):
    """Root settings.
    
    Loads configuration from environment variables with JOBRAIL_ prefix and
    from a .env file in the working directory.
    
    Example environment variables:
        JOBRAIL_DEBUG=true
        JOBRAIL_CONVERSION_RATE=0.93
        JOBRAIL_LOG_FORMAT=json
    """
    
    model_config = SettingsConfigDict(
        env_prefix="JOBRAIL_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )
    
    debug: bool = Field(default=False, description="Force DEBUG logging")
    
    conversion: ConversionSettings = Field(default_factory=ConversionSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    
    @computed_field
    @property
    def effective_log_level(self) -> str:
        """DEBUG when debug is set, otherwise the configured level."""
        return "DEBUG" if self.debug else self.logging.level


@lru_cache(maxsize=1)
def get_settings() -> JobrailSettings:
    """Get the global settings instance (cached)."""
    return JobrailSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache so the next get_settings() rereads the environment."""
    get_settings.cache_clear()
