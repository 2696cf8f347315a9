"""
Infrastructure package for the puzzle runner.

Centralizes file I/O concerns (locating and reading puzzle inputs), keeping
solvers and the orchestrator free of filesystem details.
"""

from aoc.infrastructure.inputs import InputNotFoundError, input_path, read_input

__all__ = [
    "InputNotFoundError",
    "input_path",
    "read_input",
]
