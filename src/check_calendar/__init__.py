"""check-calendar: next gcalcli event for the xmobar status bar.

Runs ``gcalcli agenda`` for the rest of today, parses the first event
line and renders it, in red when it is about to start.
"""

from __future__ import annotations

from check_calendar.exceptions import ProcessError
from check_calendar.models.event import CalendarEvent, ParseFailure
from check_calendar.normalizer import first_event_line
from check_calendar.parser import parse_event, split_time_and_description
from check_calendar.pipeline import CheckResult, run_check
from check_calendar.reminder import REMIND_INTERVAL, is_imminent
from check_calendar.render import format_event

__version__ = "0.1.0"

__all__ = [
    "REMIND_INTERVAL",
    "CalendarEvent",
    "CheckResult",
    "ParseFailure",
    "ProcessError",
    "first_event_line",
    "format_event",
    "is_imminent",
    "parse_event",
    "run_check",
    "split_time_and_description",
]
