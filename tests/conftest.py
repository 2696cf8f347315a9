"""
Pytest configuration for the puzzle runner.

Provides fixtures for:
- Locating the bundled fixture inputs
- Building throwaway input directories with a full puzzle input
- Resetting cached settings between tests
"""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Callable, List

import pytest

from aoc.config import get_settings
from aoc.domain.models import Configuration

REPO_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch):
    """
    Clear the settings cache so environment overrides in one test do not leak.
    """
    for var in (
        "AOC_INPUT_DIR",
        "AOC_RESULTS_DIR",
        "LOG_LEVEL",
        "LOG_JSON",
        "GAME_MAX_RED",
        "GAME_MAX_GREEN",
        "GAME_MAX_BLUE",
    ):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(scope="session")
def fixture_dir() -> Path:
    """Directory holding the bundled `DayNN_test*.txt` fixtures."""
    return REPO_ROOT / "inputs"


@pytest.fixture(scope="session")
def game_fixture_lines(fixture_dir: Path) -> List[str]:
    return (fixture_dir / "Day02_test.txt").read_text(encoding="utf-8").splitlines()


@pytest.fixture(scope="session")
def puzzle_configuration() -> Configuration:
    return Configuration(red=12, green=13, blue=14)


@pytest.fixture
def input_dir(tmp_path: Path, fixture_dir: Path) -> Path:
    """
    Temporary input directory seeded with the fixtures.

    Full puzzle inputs are absent; use `write_input` to add them.
    """
    target = tmp_path / "inputs"
    target.mkdir()
    for fixture in fixture_dir.glob("Day*_test*.txt"):
        shutil.copy(fixture, target / fixture.name)
    return target


@pytest.fixture
def write_input(input_dir: Path) -> Callable[[str, List[str]], Path]:
    def _write(name: str, lines: List[str]) -> Path:
        path = input_dir / f"{name}.txt"
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write
