"""Data models for check-calendar."""

from __future__ import annotations

from check_calendar.models.event import CalendarEvent, ParseFailure

__all__ = [
    "CalendarEvent",
    "ParseFailure",
]
