"""Entry point for ``python -m check_calendar`` and ``checkCalendar``.

Prints exactly one line for an xmobar ``Com`` command: the next event
of today's agenda, or a fallback line.

Command-line arguments are not interpreted; they are handed to gcalcli
verbatim, ahead of the ``agenda`` subcommand (e.g.
``checkCalendar --calendar=work@example.com``).  For that reason there
is no argument parser and no ``--help``.

Exit codes:
    0 -- Always.  Failures are reported through the printed line,
         because the status bar does not look at exit codes.
"""

from __future__ import annotations

import logging
import sys

from check_calendar.config import ConfigError, Settings, load_settings
from check_calendar.log import PACKAGE_LOGGER, setup_logging
from check_calendar.pipeline import run_check

# Not __name__: under ``python -m`` that is "__main__", outside the
# package logger.
logger = logging.getLogger(f"{PACKAGE_LOGGER}.cli")


def _configure_logging(settings: Settings) -> None:
    """Set up logging from *settings*, falling back to stderr."""
    try:
        setup_logging(settings.log_level, settings.log_file)
    except OSError as exc:
        setup_logging(settings.log_level)
        logger.warning("Cannot open log file %s: %s", settings.log_file, exc)


def main(argv: list[str] | None = None) -> int:
    """Run one calendar check and print the resulting line.

    Args:
        argv: Arguments for gcalcli.  Defaults to ``sys.argv[1:]`` when
            ``None`` (the normal case).

    Returns:
        Exit code, always ``0``.
    """
    extra_args = sys.argv[1:] if argv is None else argv

    try:
        settings = load_settings()
    except ConfigError as exc:
        setup_logging()
        logger.error("%s", exc)
        print(f"check-calendar: {exc}")
        return 0

    _configure_logging(settings)

    try:
        result = run_check(settings, extra_args)
    except ConfigError as exc:
        logger.error("%s", exc)
        print(f"check-calendar: {exc}")
        return 0

    print(result.line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
