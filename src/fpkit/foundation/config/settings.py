"""Environment-based configuration using pydantic-settings.

Provides type-safe, validated configuration from environment variables
with sensible defaults. Supports .env files and nested configuration.

Example:
    >>> from fpkit.foundation.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.logging.level)
    'WARNING'

    # Or with environment variables:
    # FPKIT_LOG_LEVEL=DEBUG
    # FPKIT_PIPELINE_TRACE=true
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="FPKIT_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["console", "json", "none"] = "none"
    colors: bool | None = Field(default=None, description="Force console colors (None = auto-detect)")

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class PipelineSettings(BaseSettings):
    """Pipe/Pipeline behaviour."""

    model_config = SettingsConfigDict(
        env_prefix="FPKIT_PIPELINE_",
        extra="ignore",
    )

    trace: bool = Field(default=False, description="Log every Pipeline step at debug level")


class FpkitSettings(BaseSettings):
    """Root settings for fpkit.

    Loads configuration from environment variables with FPKIT_ prefix.
    Supports nested configuration and .env files.

    Example environment variables:
        FPKIT_DEBUG=true
        FPKIT_LOG_LEVEL=DEBUG
        FPKIT_LOG_FORMAT=json
        FPKIT_PIPELINE_TRACE=true
    """

    model_config = SettingsConfigDict(
        env_prefix="FPKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")

    # Nested settings (loaded with FPKIT_LOG_, FPKIT_PIPELINE_)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    pipeline: PipelineSettings = Field(default_factory=PipelineSettings)

    @computed_field
    @property
    def effective_log_level(self) -> str:
        """Log level after applying debug mode."""
        return "DEBUG" if self.debug else self.logging.level


@lru_cache(maxsize=1)
def get_settings() -> FpkitSettings:
    """Get the global settings instance (cached).

    Example:
        >>> settings = get_settings()
        >>> settings.debug
        False
    """
    return FpkitSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
