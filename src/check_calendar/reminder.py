"""Decide whether an event is about to start."""

from __future__ import annotations

from datetime import datetime, timedelta

from check_calendar.models.event import CalendarEvent

# Events starting within this interval are highlighted.
REMIND_INTERVAL = timedelta(seconds=300)


def is_imminent(
    now: datetime,
    event: CalendarEvent,
    interval: timedelta = REMIND_INTERVAL,
) -> bool:
    """Return ``True`` if *event* starts no later than *interval* from *now*.

    Only the upper bound is checked: an event that already started is
    imminent too.  The bound is inclusive.
    """
    return event.start_time - now <= interval
