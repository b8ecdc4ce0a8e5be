"""Configuration loading for check-calendar.

Reads settings from environment variables (with .env support via
python-dotenv).  Every setting is optional; invalid values raise
:class:`ConfigError`.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import datetime, timedelta, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv


class ConfigError(Exception):
    """Raised when configuration is invalid."""


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables.

    Attributes:
        command: Calendar CLI to execute (default ``"gcalcli"``).
        cutoff: Wall-clock end of the agenda window, ``HH:MM:SS``
            (default ``"22:00:00"``).
        remind_seconds: How close an event has to be to count as
            imminent (default ``300``).
        placeholder: Fixed line printed on any failure.  ``None`` means
            the failure diagnostic itself is printed.
        log_level: Logging level (default ``"WARNING"``).
        log_file: File to append log records to, or ``None`` for stderr.
        timezone: IANA timezone name, or ``None`` for the process
            local timezone.
    """

    command: str = "gcalcli"
    cutoff: str = "22:00:00"
    remind_seconds: int = 300
    placeholder: str | None = None
    log_level: str = "WARNING"
    log_file: str | None = None
    timezone: str | None = None

    @property
    def remind_interval(self) -> timedelta:
        """:attr:`remind_seconds` as a :class:`~datetime.timedelta`."""
        return timedelta(seconds=self.remind_seconds)


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Calls :func:`dotenv.load_dotenv` so a ``.env`` file in the working
    directory is picked up automatically.

    Returns:
        A validated :class:`Settings` instance.

    Raises:
        ConfigError: If any variable holds an invalid value.  The error
            message names **all** offending variables.
    """
    load_dotenv()

    values: dict[str, object] = {}
    invalid: list[str] = []

    command = os.environ.get("CHECKCAL_COMMAND")
    if command is not None:
        if command.strip():
            values["command"] = command.strip()
        else:
            invalid.append("CHECKCAL_COMMAND")

    cutoff = os.environ.get("CHECKCAL_CUTOFF", "").strip()
    if cutoff:
        try:
            datetime.strptime(cutoff, "%H:%M:%S")
        except ValueError:
            invalid.append("CHECKCAL_CUTOFF")
        else:
            values["cutoff"] = cutoff

    remind = os.environ.get("CHECKCAL_REMIND_SECONDS", "").strip()
    if remind:
        if remind.isdigit():
            values["remind_seconds"] = int(remind)
        else:
            invalid.append("CHECKCAL_REMIND_SECONDS")

    # An empty placeholder is meaningful (print a blank line).
    placeholder = os.environ.get("CHECKCAL_PLACEHOLDER")
    if placeholder is not None:
        values["placeholder"] = placeholder

    log_level = os.environ.get("LOG_LEVEL", "").strip()
    if log_level:
        if isinstance(logging.getLevelName(log_level.upper()), int):
            values["log_level"] = log_level.upper()
        else:
            invalid.append("LOG_LEVEL")

    log_file = os.environ.get("CHECKCAL_LOG_FILE", "").strip()
    if log_file:
        values["log_file"] = log_file

    timezone = os.environ.get("TIMEZONE", "").strip()
    if timezone:
        try:
            resolve_timezone(timezone)
        except ConfigError:
            invalid.append("TIMEZONE")
        else:
            values["timezone"] = timezone

    if invalid:
        names = ", ".join(invalid)
        raise ConfigError(f"Invalid environment variables: {names}")

    return Settings(**values)  # type: ignore[arg-type]


def resolve_timezone(name: str | None = None) -> tzinfo:
    """Return the timezone to interpret gcalcli's wall-clock times in.

    Args:
        name: IANA timezone name.  ``None`` selects the process local
            timezone (honouring ``TZ``), as a fixed UTC offset.

    Raises:
        ConfigError: If *name* is not a known timezone, or the local
            timezone cannot be determined.
    """
    if name is None:
        local = datetime.now().astimezone().tzinfo
        if local is None:
            raise ConfigError("Cannot determine the local timezone")
        return local
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ConfigError(f"Unknown timezone: {name!r}") from exc
