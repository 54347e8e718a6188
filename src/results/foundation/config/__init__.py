"""Configuration via pydantic-settings (RESULTS_* environment variables)."""

from .settings import (
    CodecSettings,
    LoggingSettings,
    ResultsSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "ResultsSettings",
    "LoggingSettings",
    "CodecSettings",
    "get_settings",
    "clear_settings_cache",
]
