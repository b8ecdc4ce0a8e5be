"""Shared fixtures for check-calendar tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from datetime import timezone, tzinfo
from zoneinfo import ZoneInfo

import pytest

_ENV_VARS = (
    "CHECKCAL_COMMAND",
    "CHECKCAL_CUTOFF",
    "CHECKCAL_REMIND_SECONDS",
    "CHECKCAL_PLACEHOLDER",
    "CHECKCAL_LOG_FILE",
    "LOG_LEVEL",
    "TIMEZONE",
)


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove all check-calendar environment variables.

    Patches ``load_dotenv`` so a real ``.env`` file cannot re-inject values
    that the test explicitly removed.
    """
    monkeypatch.setattr("check_calendar.config.load_dotenv", lambda *_a, **_kw: None)
    for key in _ENV_VARS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture()
def utc() -> tzinfo:
    return timezone.utc


@pytest.fixture()
def brisbane() -> tzinfo:
    """UTC+10 all year round (no DST), handy for offset arithmetic."""
    return ZoneInfo("Australia/Brisbane")


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Generator[None, None, None]:
    """Reset the ``check_calendar`` logger after each test to prevent handler leaks."""
    logger = logging.getLogger("check_calendar")
    original_handlers = logger.handlers[:]
    original_level = logger.level
    yield
    for handler in logger.handlers:
        if handler not in original_handlers:
            handler.close()
    logger.handlers = original_handlers
    logger.setLevel(original_level)
