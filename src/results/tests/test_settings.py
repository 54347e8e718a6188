"""Tests for environment-based settings."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from results.foundation.config import ResultsSettings, clear_settings_cache, get_settings


def test_defaults() -> None:
    settings = get_settings()

    assert settings.debug is False
    assert settings.logging.level == "WARNING"
    assert settings.logging.format == "console"
    assert settings.codec.default == "orjson"
    assert settings.codec.include_traceback is False
    assert settings.effective_log_level == "WARNING"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RESULTS_LOG_LEVEL", "info")
    monkeypatch.setenv("RESULTS_LOG_FORMAT", "json")
    monkeypatch.setenv("RESULTS_CODEC_DEFAULT", "msgpack")

    settings = ResultsSettings()

    assert settings.logging.level == "INFO"
    assert settings.logging.format == "json"
    assert settings.codec.default == "msgpack"


def test_debug_forces_debug_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RESULTS_DEBUG", "true")

    assert ResultsSettings().effective_log_level == "DEBUG"


def test_env_file(tmp_path: Path) -> None:
    """Test .env in the working directory is read (conftest chdirs to tmp_path)."""
    (tmp_path / ".env").write_text("RESULTS_DEBUG=true\n")

    assert ResultsSettings().debug is True


def test_invalid_value_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RESULTS_CODEC_DEFAULT", "xml")

    with pytest.raises(ValidationError):
        ResultsSettings()


def test_get_settings_is_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    first = get_settings()
    monkeypatch.setenv("RESULTS_DEBUG", "true")

    assert get_settings() is first

    clear_settings_cache()
    assert get_settings().debug is True
