import os
from pathlib import Path
from time import sleep

import pytest
from typer.testing import CliRunner

from aoc import config
from aoc.domain.games import parse_record, sum_powers
from aoc.domain.models import Configuration
from aoc.orchestrator import available_solvers
from aoc.utils import profiler
from scripts import generate_games


def test_get_settings_defaults():
    settings = config.get_settings()
    assert settings.input_dir == "inputs"
    assert settings.results_dir == "results"
    assert settings.log_level == "INFO"
    assert settings.log_json is False
    assert settings.game_configuration() == Configuration(red=12, green=13, blue=14)


def test_logging_environment_is_isolated_between_tests():
    assert "LOG_LEVEL" not in os.environ
    assert "LOG_JSON" not in os.environ


def test_get_settings_reads_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("AOC_INPUT_DIR", "/tmp/puzzles")
    monkeypatch.setenv("GAME_MAX_BLUE", "3")
    config.get_settings.cache_clear()

    settings = config.get_settings()

    assert settings.input_dir == "/tmp/puzzles"
    assert settings.game_configuration().blue == 3


def test_get_settings_is_cached():
    assert config.get_settings() is config.get_settings()


def test_profile_block_measures_time():
    with profiler.profile_block("sleep") as stats:
        sleep(0.05)
    assert stats.duration_seconds >= 0.05
    assert stats.peak_rss_bytes and stats.peak_rss_bytes > 0
    assert isinstance(stats.cpu_percent, float)


def test_available_solvers_contains_known_entries():
    names = available_solvers()
    assert "day01" in names
    assert "day02" in names


def test_generated_records_reparse_from_canonical_lines():
    records = generate_games._generate_records(50, max_rounds=5, max_cubes=20, seed=123)
    assert [r.id for r in records] == list(range(1, 51))
    for record in records:
        assert 1 <= len(record.rounds) <= 5
        assert parse_record(record.to_line()) == record


def test_generated_records_are_deterministic():
    first = generate_games._generate_records(10, max_rounds=3, max_cubes=5, seed=7)
    second = generate_games._generate_records(10, max_rounds=3, max_cubes=5, seed=7)
    assert first == second


def test_generate_games_cli_writes_solvable_file(tmp_path: Path):
    output = tmp_path / "games.txt"
    result = CliRunner().invoke(
        generate_games.app, ["--games", "25", "--seed", "5", "--output", str(output)]
    )

    assert result.exit_code == 0, result.output
    lines = output.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 25
    records = [parse_record(line) for line in lines]
    expected = generate_games._generate_records(25, max_rounds=6, max_cubes=20, seed=5)
    assert sum_powers(records) == sum_powers(expected)
