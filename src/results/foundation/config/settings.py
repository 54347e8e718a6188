"""Environment-based configuration using pydantic-settings.

Provides type-safe, validated configuration from environment variables
with sensible defaults. Supports .env files and nested configuration.

Example:
    >>> from results.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.codec.default
    'orjson'
    >>> settings.logging.level
    'WARNING'

    # Or with environment variables:
    # RESULTS_CODEC_INCLUDE_TRACEBACK=true
    # RESULTS_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="RESULTS_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["console", "json", "none"] = "console"

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class CodecSettings(BaseSettings):
    """Serialization configuration."""

    model_config = SettingsConfigDict(
        env_prefix="RESULTS_CODEC_",
        extra="ignore",
    )

    default: Literal["orjson", "msgpack"] = "orjson"
    include_traceback: bool = Field(default=False, description="Add formatted traceback to serialized reasons")
    sort_keys: bool = Field(default=False, description="Sort keys in JSON output")


class ResultsSettings(BaseSettings):
    """Root settings for the results package.

    Loads configuration from environment variables with RESULTS_ prefix.

    Example environment variables:
        RESULTS_DEBUG=true
        RESULTS_LOG_FORMAT=json
        RESULTS_CODEC_DEFAULT=msgpack
    """

    model_config = SettingsConfigDict(
        env_prefix="RESULTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    codec: CodecSettings = Field(default_factory=CodecSettings)

    @computed_field
    @property
    def effective_log_level(self) -> str:
        """Debug mode forces DEBUG logging."""
        return "DEBUG" if self.debug else self.logging.level


@lru_cache(maxsize=1)
def get_settings() -> ResultsSettings:
    """Get the global settings instance (cached)."""
    return ResultsSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
