"""Shared test fixtures and configuration."""

from __future__ import annotations

import datetime as dt
import os

import pytest

os.environ.setdefault("AGENDA_ENV", "test")
os.environ.setdefault("AGENDA_LOG_LEVEL", "WARNING")

from agenda.config import Settings


@pytest.fixture
def settings() -> Settings:
    """Return test settings."""
    return Settings(
        agenda_env="test",
        agenda_log_level="WARNING",
        _env_file=None,
    )


@pytest.fixture
def one_hour() -> dt.timedelta:
    """Duration used by most test events."""
    return dt.timedelta(hours=1)
