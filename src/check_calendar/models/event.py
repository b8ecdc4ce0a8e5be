"""Data models for a parsed agenda line.

- :class:`CalendarEvent` -- the next upcoming event, with an absolute
  (timezone-aware) start time.
- :class:`ParseFailure` -- returned by the parser when a line cannot be
  read as an event.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import AwareDatetime, BaseModel, ConfigDict


class CalendarEvent(BaseModel):
    """A single upcoming calendar event.

    Attributes:
        start_time: When the event begins.  Must carry a timezone; naive
            datetimes are rejected so local wall-clock times can never
            leak through unconverted.
        description: Event title as printed by gcalcli (may be empty).
    """

    model_config = ConfigDict(frozen=True)

    start_time: AwareDatetime
    description: str = ""


@dataclass(frozen=True)
class ParseFailure:
    """An agenda line that could not be interpreted as an event.

    Attributes:
        message: Human-readable diagnostic, e.g.
            ``"Invalid time: No meetings"``.
        raw_line: The (year-prefixed) line handed to the parser.
    """

    message: str
    raw_line: str = ""
