"""Render an event as an xmobar status line.

Imminent events are wrapped in xmobar's colour markup::

    <fc=#FF0000>11:45 rpmdiff daily scrum</fc>
"""

from __future__ import annotations

from datetime import datetime, timedelta, tzinfo

from check_calendar.models.event import CalendarEvent
from check_calendar.reminder import REMIND_INTERVAL, is_imminent

REMINDER_COLOR = "#FF0000"


def format_event(
    tz: tzinfo,
    now: datetime,
    event: CalendarEvent,
    interval: timedelta = REMIND_INTERVAL,
) -> str:
    """Format *event* as ``HH:MM description``, highlighted when imminent.

    The start time is stored as an absolute instant, so it is converted
    back to *tz* for display.

    Args:
        tz: Display timezone.
        now: Current time, used for the imminence check.
        event: The event to render.
        interval: Reminder window passed to
            :func:`~check_calendar.reminder.is_imminent`.

    Returns:
        The status-bar line, without a trailing newline.
    """
    text = f"{event.start_time.astimezone(tz):%H:%M} {event.description}"
    if is_imminent(now, event, interval):
        return f"<fc={REMINDER_COLOR}>{text}</fc>"
    return text
