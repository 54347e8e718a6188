"""Shared fixtures: isolate settings and logging configuration per test."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from results.foundation.config import clear_settings_cache
from results.runtime.observability import reset_logging


@pytest.fixture(autouse=True)
def clean_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> object:
    """Drop RESULTS_* env vars and cached settings/logging before each test."""
    for key in list(os.environ):
        if key.startswith("RESULTS_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)  # no stray .env
    clear_settings_cache()
    reset_logging()
    yield
    clear_settings_cache()
    reset_logging()
