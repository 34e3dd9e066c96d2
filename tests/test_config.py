"""
Tests for `year_bounds/config.py`.

Covers:
- YEAR_BOUNDS_DEFAULT_TZ is read from the environment.
- Missing or blank values fall back to UTC.
"""

from __future__ import annotations

import importlib
from typing import Iterator

import pytest

from year_bounds import config


@pytest.fixture
def reload_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    yield monkeypatch
    monkeypatch.delenv("YEAR_BOUNDS_DEFAULT_TZ", raising=False)
    importlib.reload(config)


def test_default_time_zone_from_environment(reload_config: pytest.MonkeyPatch) -> None:
    """Verify the default zone is taken from YEAR_BOUNDS_DEFAULT_TZ."""

    reload_config.setenv("YEAR_BOUNDS_DEFAULT_TZ", "Asia/Tokyo")
    importlib.reload(config)

    assert config.DEFAULT_TIME_ZONE == "Asia/Tokyo"


def test_blank_default_time_zone_falls_back_to_utc(reload_config: pytest.MonkeyPatch) -> None:
    """Verify a blank value falls back to UTC."""

    reload_config.setenv("YEAR_BOUNDS_DEFAULT_TZ", "   ")
    importlib.reload(config)

    assert config.DEFAULT_TIME_ZONE == "UTC"
