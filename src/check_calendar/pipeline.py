"""Orchestration of a single check-calendar run.

Wires the components together: build the gcalcli arguments, run the
command, pick and repair the first agenda line, parse it, and render
it.  The top-level entry point is :func:`run_check`, which returns a
:class:`CheckResult` whose :attr:`~CheckResult.line` is what the CLI
prints.

This is the only place where :class:`~check_calendar.exceptions.ProcessError`
and :class:`~check_calendar.models.event.ParseFailure` are handled; both
turn into a fallback line.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import datetime, tzinfo

from check_calendar.config import Settings, resolve_timezone
from check_calendar.exceptions import ProcessError
from check_calendar.gcalcli import build_agenda_args, run_command
from check_calendar.models.event import CalendarEvent, ParseFailure
from check_calendar.normalizer import first_event_line
from check_calendar.parser import parse_event
from check_calendar.reminder import is_imminent
from check_calendar.render import format_event

logger = logging.getLogger(__name__)

CommandRunner = Callable[[str, Sequence[str]], str]


@dataclass(frozen=True)
class CheckResult:
    """Outcome of one run.

    Attributes:
        line: The line to print (rendered event or fallback).
        event: The parsed event, or ``None`` on failure.
        failure: The parse failure, if the agenda line was unusable.
        error: Message of the process error, if gcalcli failed.
        imminent: Whether the event was rendered with the reminder markup.
    """

    line: str
    event: CalendarEvent | None = None
    failure: ParseFailure | None = None
    error: str | None = None
    imminent: bool = False

    @property
    def ok(self) -> bool:
        """Whether an event was found and rendered."""
        return self.event is not None


def run_check(
    settings: Settings,
    extra_args: Sequence[str] = (),
    now: datetime | None = None,
    tz: tzinfo | None = None,
    runner: CommandRunner | None = None,
) -> CheckResult:
    """Run the agenda query and render the next event.

    *now* and *tz* are resolved once and used for every step, so the
    imminence check and the rendering agree with each other.

    Args:
        settings: Loaded configuration.
        extra_args: Caller arguments passed through to gcalcli.
        now: Current time.  Defaults to ``datetime.now(tz)``.
        tz: Local timezone.  Defaults to :attr:`Settings.timezone` or
            the process local timezone.
        runner: Executes the command and returns its stdout.  Defaults
            to :func:`~check_calendar.gcalcli.run_command`.

    Returns:
        A :class:`CheckResult`; never raises for process or parse
        failures.

    Raises:
        ConfigError: If *tz* is not given and the local timezone cannot
            be determined.
    """
    if tz is None:
        tz = resolve_timezone(settings.timezone)
    now = datetime.now(tz) if now is None else now.astimezone(tz)

    if runner is None:
        runner = run_command

    args = build_agenda_args(now, extra_args, settings.cutoff)

    try:
        output = runner(settings.command, args)
    except ProcessError as exc:
        logger.warning(
            "Agenda command failed (status %s): %s %s",
            exc.returncode,
            exc,
            exc.stderr.strip(),
        )
        return CheckResult(
            line=_fallback(settings, f"{settings.command}: {exc}"),
            error=str(exc),
        )

    line = first_event_line(now, output)
    logger.debug("Candidate agenda line: %r", line)

    parsed = parse_event(tz, line)
    if isinstance(parsed, ParseFailure):
        logger.warning("No usable event: %s", parsed.message)
        return CheckResult(
            line=_fallback(settings, parsed.message),
            failure=parsed,
        )

    return CheckResult(
        line=format_event(tz, now, parsed, settings.remind_interval),
        event=parsed,
        imminent=is_imminent(now, parsed, settings.remind_interval),
    )


def _fallback(settings: Settings, diagnostic: str) -> str:
    """Return the configured placeholder, or *diagnostic* if none is set."""
    if settings.placeholder is not None:
        return settings.placeholder
    return diagnostic
