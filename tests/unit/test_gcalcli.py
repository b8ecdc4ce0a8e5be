"""Tests for the gcalcli invoker and agenda argument builder."""

from __future__ import annotations

import sys
from datetime import datetime, timezone

import pytest

from check_calendar.exceptions import ProcessError
from check_calendar.gcalcli import build_agenda_args, run_command

NOW = datetime(2015, 6, 22, 9, 5, 7, tzinfo=timezone.utc)


class TestBuildAgendaArgs:
    """Tests for build_agenda_args."""

    def test_default_window(self) -> None:
        assert build_agenda_args(NOW) == [
            "--nocolor",
            "--military",
            "agenda",
            "2015-06-22 09:05:07",
            "2015-06-22 22:00:00",
        ]

    def test_extra_args_come_first(self) -> None:
        args = build_agenda_args(NOW, ["--calendar=work@example.com"])

        assert args[0] == "--calendar=work@example.com"
        assert args[1:4] == ["--nocolor", "--military", "agenda"]

    def test_extra_args_passed_verbatim(self) -> None:
        extra = ["--calendar", "Team  Calendar", "-h"]

        assert build_agenda_args(NOW, extra)[:3] == extra

    def test_custom_cutoff(self) -> None:
        assert build_agenda_args(NOW, cutoff="23:59:59")[-1] == "2015-06-22 23:59:59"

    def test_uses_local_date(self, brisbane) -> None:
        """20:00 UTC is already the next morning in UTC+10."""
        now = datetime(2015, 6, 22, 20, 0, tzinfo=timezone.utc).astimezone(brisbane)

        assert build_agenda_args(now)[-2:] == ["2015-06-23 06:00:00", "2015-06-23 22:00:00"]


class TestRunCommand:
    """Tests for run_command, using the running interpreter as a stand-in."""

    def test_returns_stdout(self) -> None:
        output = run_command(
            sys.executable,
            ["-c", "print('Mon Jun 22 11:45 rpmdiff daily scrum')"],
        )

        assert output == "Mon Jun 22 11:45 rpmdiff daily scrum\n"

    def test_arguments_reach_the_program(self) -> None:
        output = run_command(
            sys.executable,
            ["-c", "import sys; print(sys.argv[1:])", "agenda", "2015-06-22 09:00:00"],
        )

        assert output.strip() == "['agenda', '2015-06-22 09:00:00']"

    def test_stdin_is_empty(self) -> None:
        output = run_command(sys.executable, ["-c", "import sys; print(repr(sys.stdin.read()))"])

        assert output.strip() == "''"

    def test_undecodable_output_is_replaced(self) -> None:
        """A Latin-1 event title must not abort the run."""
        output = run_command(
            sys.executable,
            [
                "-c",
                "import sys; sys.stdout.buffer.write(b'Mon Jun 22 11:45 caf\\xe9 meeting\\n')",
            ],
        )

        assert output.startswith("Mon Jun 22 11:45 caf")
        assert output.endswith(" meeting\n")
        assert len(output.split()) == 6

    def test_missing_program_raises(self) -> None:
        with pytest.raises(ProcessError, match="cannot run") as exc_info:
            run_command("check-calendar-no-such-program", ["agenda"])

        assert exc_info.value.returncode is None
        assert exc_info.value.command == ["check-calendar-no-such-program", "agenda"]

    def test_non_zero_exit_raises(self) -> None:
        with pytest.raises(ProcessError, match="exited with status 3") as exc_info:
            run_command(
                sys.executable,
                ["-c", "import sys; sys.stderr.write('token expired'); sys.exit(3)"],
            )

        assert exc_info.value.returncode == 3
        assert exc_info.value.stderr == "token expired"
