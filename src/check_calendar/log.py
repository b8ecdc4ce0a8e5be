"""Logging setup for check-calendar.

*stdout* carries the status-bar line and nothing else, so records go to
*stderr* or, because xmobar throws stderr away, to a log file
(``CHECKCAL_LOG_FILE``).  Only the ``check_calendar`` logger is
configured; the root logger is left to whoever embeds the package.
"""

from __future__ import annotations

import logging
import sys

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

PACKAGE_LOGGER = "check_calendar"


def setup_logging(level: str = "WARNING", log_file: str | None = None) -> logging.Handler:
    """Send ``check_calendar`` log records to stderr or *log_file*.

    Repeated calls replace the previous handler, so there is always
    exactly one.

    Args:
        level: A standard logging level name (case-insensitive).
        log_file: Path to append records to.  ``None`` logs to stderr.

    Returns:
        The installed handler.

    Raises:
        ValueError: If *level* is not a recognised logging level string.
        OSError: If *log_file* cannot be opened for appending.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level!r}")

    if log_file is None:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
    else:
        handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))

    logger = logging.getLogger(PACKAGE_LOGGER)
    for old in logger.handlers[:]:
        logger.removeHandler(old)
        old.close()
    logger.setLevel(numeric_level)
    logger.addHandler(handler)
    return handler
