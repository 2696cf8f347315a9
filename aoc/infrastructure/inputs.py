"""
Puzzle input loading.

Inputs live as `<input_dir>/<name>.txt` (e.g. `inputs/Day02_test.txt`) and
are read fully into memory as a list of lines before any solver runs.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from aoc.config import get_settings
from aoc.utils.logging import get_logger

log = get_logger(__name__)


class InputNotFoundError(FileNotFoundError):
    """The requested puzzle input file does not exist."""

    def __init__(self, name: str, path: Path) -> None:
        self.name = name
        self.path = path
        super().__init__(f"Input '{name}' not found at {path}")


def input_path(name: str, input_dir: Optional[Path | str] = None) -> Path:
    base = Path(input_dir) if input_dir is not None else Path(get_settings().input_dir)
    return base / f"{name}.txt"


def read_input(name: str, input_dir: Optional[Path | str] = None) -> List[str]:
    """
    Read every line of the named input file.

    Trailing newlines are dropped; a final empty line is not reported.

    Raises
    ------
    InputNotFoundError
        The file does not exist.
    """
    path = input_path(name, input_dir)
    if not path.is_file():
        raise InputNotFoundError(name, path)
    lines = path.read_text(encoding="utf-8").splitlines()
    log.debug("Input loaded", extra={"input": name, "lines": len(lines)})
    return lines


__all__ = ["InputNotFoundError", "input_path", "read_input"]
