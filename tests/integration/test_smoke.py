"""
End-to-end CLI tests for the puzzle runner.

These drive the typer app the way a user would: fixture self-checks first,
then the full puzzle input, with answers printed one per line.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, List

import pytest
from typer.testing import CliRunner

from aoc import main as cli
from aoc.main import app, main

QUIET_ENV = {"LOG_LEVEL": "WARNING"}


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestRunCommand:
    def test_prints_both_parts_per_day(
        self,
        runner: CliRunner,
        input_dir: Path,
        write_input: Callable[[str, List[str]], Path],
        game_fixture_lines: List[str],
    ):
        write_input("Day02", game_fixture_lines)

        result = runner.invoke(app, ["run", "--day", "day02", "--input-dir", str(input_dir)], env=QUIET_ENV)

        assert result.exit_code == 0, result.output
        assert result.stdout.split() == ["8", "2286"]

    def test_all_days(
        self,
        runner: CliRunner,
        input_dir: Path,
        write_input: Callable[[str, List[str]], Path],
        game_fixture_lines: List[str],
    ):
        write_input("Day01", ["1abc2", "pqr3stu8vwx", "a1b2c3d4e5f", "treb7uchet"])
        write_input("Day02", game_fixture_lines)

        result = runner.invoke(app, ["run", "--input-dir", str(input_dir)], env=QUIET_ENV)

        assert result.exit_code == 0, result.output
        assert result.stdout.split() == ["142", "142", "8", "2286"]

    def test_failed_self_check_exits_without_answers(
        self,
        runner: CliRunner,
        input_dir: Path,
        write_input: Callable[[str, List[str]], Path],
        game_fixture_lines: List[str],
    ):
        # a truncated fixture makes part 1 answer 1 instead of 8
        write_input("Day02_test", game_fixture_lines[:1])
        write_input("Day02", game_fixture_lines)

        result = runner.invoke(app, ["run", "--day", "day02", "--input-dir", str(input_dir)], env=QUIET_ENV)

        assert result.exit_code == 1
        assert "Self-check failed for day02 part 1" in result.output
        assert "2286" not in result.output

    def test_report_renders_table(
        self,
        runner: CliRunner,
        input_dir: Path,
        write_input: Callable[[str, List[str]], Path],
        game_fixture_lines: List[str],
    ):
        write_input("Day02", game_fixture_lines)

        result = runner.invoke(
            app, ["run", "--day", "day02", "--input-dir", str(input_dir), "--report"], env=QUIET_ENV
        )

        assert result.exit_code == 0, result.output
        assert "Puzzle Results" in result.output
        assert "2286" in result.output


class TestOtherCommands:
    def test_list(self, runner: CliRunner):
        result = runner.invoke(app, ["list"])
        assert result.exit_code == 0
        assert "day01" in result.output
        assert "day02" in result.output

    def test_info_shows_bag_limits(self, runner: CliRunner):
        result = runner.invoke(app, ["info"])
        assert result.exit_code == 0
        assert "red=12 green=13 blue=14" in result.output

    def test_check_only(self, runner: CliRunner, fixture_dir: Path):
        result = runner.invoke(app, ["check", "--input-dir", str(fixture_dir)], env=QUIET_ENV)
        assert result.exit_code == 0, result.output
        assert "day01: 2 check(s) passed" in result.output
        assert "day02: 2 check(s) passed" in result.output

    def test_check_with_json_logs(self, runner: CliRunner, fixture_dir: Path):
        result = runner.invoke(
            app, ["check", "--day", "day01", "--input-dir", str(fixture_dir)], env={"LOG_JSON": "true"}
        )

        assert result.exit_code == 0, result.output
        payloads = [json.loads(line) for line in result.output.splitlines() if line.startswith("{")]
        check_logs = [p for p in payloads if "fixture" in p]
        assert check_logs
        assert check_logs[0]["day"] == "day01"
        assert check_logs[0]["fixture"] == "Day01_test"
        assert check_logs[0]["level"] == "INFO"

    @pytest.mark.parametrize("command", ["run", "check"])
    def test_unknown_day_exits_with_usage_error(self, runner: CliRunner, command: str):
        result = runner.invoke(app, [command, "--day", "day99"])

        assert result.exit_code == 2
        assert "Unknown solver 'day99'" in result.output
        assert "day01, day02" in result.output


class TestInterrupt:
    def test_ctrl_c_exits_130(self, monkeypatch: pytest.MonkeyPatch, fixture_dir: Path):
        def _interrupted(*args, **kwargs):
            raise KeyboardInterrupt

        monkeypatch.setattr(cli, "run_solvers", _interrupted)
        monkeypatch.setattr("sys.argv", ["aoc", "run", "--input-dir", str(fixture_dir)])
        monkeypatch.setenv("LOG_LEVEL", "WARNING")

        with pytest.raises(SystemExit) as excinfo:
            main()

        assert excinfo.value.code == 130
