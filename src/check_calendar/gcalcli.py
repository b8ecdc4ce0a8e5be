"""Invocation of the external ``gcalcli`` agenda command.

:func:`build_agenda_args` computes the argument vector for "from now
until the evening cutoff today"; :func:`run_command` executes a program
and returns its standard output.  Neither function interprets the
calendar output.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from datetime import datetime

from check_calendar.exceptions import ProcessError

logger = logging.getLogger(__name__)

GCALCLI_COMMAND = "gcalcli"
DEFAULT_CUTOFF = "22:00:00"

# Colour codes would end up inside the parsed line, and the parser
# expects 24-hour times.
_DEFAULT_FLAGS = ("--nocolor", "--military")


def build_agenda_args(
    now: datetime,
    extra_args: Sequence[str] = (),
    cutoff: str = DEFAULT_CUTOFF,
) -> list[str]:
    """Build the gcalcli argument vector for today's remaining agenda.

    Caller arguments are passed through verbatim and placed first, since
    gcalcli only accepts global options (``--calendar=...``) before the
    subcommand.

    Args:
        now: Current time, already expressed in the local timezone.
        extra_args: Opaque caller-supplied arguments.
        cutoff: End of the window as ``HH:MM:SS``.

    Returns:
        ``[*extra_args, "--nocolor", "--military", "agenda", from, to]``.
    """
    from_bound = now.strftime("%Y-%m-%d %H:%M:%S")
    to_bound = f"{now:%Y-%m-%d} {cutoff}"
    return [*extra_args, *_DEFAULT_FLAGS, "agenda", from_bound, to_bound]


def run_command(program: str, args: Sequence[str]) -> str:
    """Run *program* with *args* and return its standard output.

    Standard input is closed (``/dev/null``).  Output that is not valid
    in the locale encoding is decoded with replacement characters.  The
    call blocks until the process exits; there is no timeout.

    Raises:
        ProcessError: If the program cannot be started or exits with a
            non-zero status.
    """
    command = [program, *args]
    logger.debug("Running %s", command)

    try:
        completed = subprocess.run(
            command,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            # Event titles may come in any locale encoding.
            errors="replace",
            check=False,
        )
    except OSError as exc:
        raise ProcessError(
            f"cannot run {program}: {exc.strerror or exc}",
            command=command,
        ) from exc

    if completed.returncode != 0:
        raise ProcessError(
            f"{program} exited with status {completed.returncode}",
            command=command,
            returncode=completed.returncode,
            stderr=completed.stderr,
        )

    return completed.stdout
