"""
Solvers package for the puzzle runner.

Re-exports the abstract interfaces and the concrete solver classes so
downstream code can import from `aoc.solvers` directly.
"""

from aoc.solvers.abstract import (
    AbstractPuzzleSolver,
    PuzzleSolver,
    SelfCheck,
    SolverResult,
)
from aoc.solvers.day01 import CalibrationSolver
from aoc.solvers.day02 import CubeGameSolver

__all__ = [
    # Abstracts
    "AbstractPuzzleSolver",
    "PuzzleSolver",
    "SelfCheck",
    "SolverResult",
    # Concrete solvers
    "CalibrationSolver",
    "CubeGameSolver",
]
