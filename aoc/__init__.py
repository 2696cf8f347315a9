"""
Advent puzzle runner.

Small, independent puzzle solvers that each read a text input, parse it line
by line and reduce it to an integer answer:

- day01: calibration values made of the first and last digit of each line
- day02: cube game records validated against a bag configuration

Every solver verifies itself against small fixture inputs before solving the
full puzzle input.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from aoc.config import Settings, get_settings
from aoc.orchestrator import SelfCheckFailed, available_solvers, run_solvers
from aoc.solvers.abstract import (
    AbstractPuzzleSolver,
    PuzzleSolver,
    SelfCheck,
    SolverResult,
)
from aoc.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Orchestration
    "SelfCheckFailed",
    "available_solvers",
    "run_solvers",
    # Solver abstractions
    "AbstractPuzzleSolver",
    "PuzzleSolver",
    "SelfCheck",
    "SolverResult",
    # Logging
    "configure_logging",
    "get_logger",
]
