"""Parser for a single year-prefixed gcalcli agenda line.

A line looks like ``2015Mon Jun 22 11:45 rpmdiff daily scrum``: the
first four whitespace-separated tokens are the start time (with the
year glued onto the weekday by :mod:`check_calendar.normalizer`), the
rest is the event description.
"""

from __future__ import annotations

import logging
from datetime import datetime, tzinfo

from check_calendar.models.event import CalendarEvent, ParseFailure

logger = logging.getLogger(__name__)

# Year, abbreviated weekday, abbreviated month, day, 24-hour HH:MM.
AGENDA_TIME_FORMAT = "%Y%a %b %d %H:%M"

_TIME_TOKEN_COUNT = 4


def split_time_and_description(line: str) -> tuple[str, str]:
    """Split an agenda line into its time token and its description.

    Both parts are re-joined with single spaces.  With fewer than four
    tokens the whole line is the time token and the description is
    empty::

        >>> split_time_and_description("Mon Jun 22 11:45 rpmdiff daily scrum")
        ('Mon Jun 22 11:45', 'rpmdiff daily scrum')
        >>> split_time_and_description("Foo bar")
        ('Foo bar', '')
    """
    words = line.split()
    return (
        " ".join(words[:_TIME_TOKEN_COUNT]),
        " ".join(words[_TIME_TOKEN_COUNT:]),
    )


def parse_agenda_time(token: str) -> datetime:
    """Parse a time token into a naive local datetime.

    The weekday must be a valid abbreviation but is not checked against
    the date it accompanies.

    Raises:
        ValueError: If *token* does not match :data:`AGENDA_TIME_FORMAT`
            or names an impossible date.
    """
    return datetime.strptime(token, AGENDA_TIME_FORMAT)


def parse_event(tz: tzinfo, line: str) -> CalendarEvent | ParseFailure:
    """Turn a year-prefixed agenda line into a :class:`CalendarEvent`.

    gcalcli prints wall-clock times in the local timezone, so the parsed
    time is interpreted in *tz*.

    Args:
        tz: Timezone of the wall-clock times in *line*.
        line: Output of :func:`~check_calendar.normalizer.first_event_line`
            (``""`` when there was no event).

    Returns:
        The event, or a :class:`ParseFailure` carrying the offending
        time token.  Never raises for malformed input.
    """
    token, description = split_time_and_description(line)

    try:
        local_time = parse_agenda_time(token)
    except ValueError as exc:
        logger.debug("Cannot parse time token %r: %s", token, exc)
        return ParseFailure(message=f"Invalid time: {token}", raw_line=line)

    return CalendarEvent(
        start_time=local_time.replace(tzinfo=tz),
        description=description,
    )
