"""
Utilities package for the puzzle runner.

Exports shared helpers for logging and profiling.
Keep this package lightweight and free of puzzle-specific logic.
"""

from aoc.utils.logging import configure_logging, get_logger
from aoc.utils.profiler import ProfileStats, profile_block

__all__ = [
    "configure_logging",
    "get_logger",
    "ProfileStats",
    "profile_block",
]
