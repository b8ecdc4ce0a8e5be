"""Custom exceptions for check-calendar.

Only failures of the external gcalcli process are modelled as
exceptions.  Unparseable agenda lines are reported as a
:class:`~check_calendar.models.event.ParseFailure` value instead, so the
parser never raises for bad input.
"""

from __future__ import annotations


class ProcessError(Exception):
    """Raised when the external calendar command cannot produce output.

    Covers a missing or non-executable program and a non-zero exit
    status.  Caught by :func:`check_calendar.pipeline.run_check` and
    turned into the fallback line; never retried.

    Attributes:
        command: The full argument vector that was executed.
        returncode: Exit status of the process, or ``None`` if it
            never started.
        stderr: Captured standard error (may be empty).
    """

    def __init__(
        self,
        message: str,
        command: list[str] | None = None,
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.command = command or []
        self.returncode = returncode
        self.stderr = stderr
