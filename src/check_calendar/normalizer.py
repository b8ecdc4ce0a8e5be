"""Reduce raw gcalcli agenda output to one candidate line.

gcalcli prints dates without a year (``Mon Jun 22 11:45 ...``), so the
chosen line is prefixed with the current year before parsing.  That
repair lives in :func:`add_missing_year` alone; if gcalcli ever prints
the year, only this module changes.
"""

from __future__ import annotations

from datetime import datetime


def clean_output(text: str) -> list[str]:
    """Split *text* into lines, dropping only the completely empty ones.

    Whitespace inside or around a non-empty line is left untouched.
    """
    return [line for line in text.split("\n") if line]


def add_missing_year(now: datetime, line: str) -> str:
    """Prepend the four-digit year of *now* to *line*, without a separator."""
    return f"{now:%Y}{line}"


def first_event_line(now: datetime, text: str) -> str:
    """Return the soonest event line with its year repaired.

    Args:
        now: Current time in the local timezone; supplies the year.
        text: Raw standard output of the agenda command.

    Returns:
        The year-prefixed first non-empty line, or ``""`` when the output
        has no non-empty line (no event found).
    """
    lines = clean_output(text)
    if not lines:
        return ""
    return add_missing_year(now, lines[0])
