"""
Domain package for the puzzle runner.

Holds the pure parsing and scoring logic of each puzzle plus the data models
and parse errors it produces. Nothing in here performs I/O.
"""

from aoc.domain.calibration import CalibrationMode, sum_calibration_values
from aoc.domain.errors import ParseError
from aoc.domain.games import is_valid, parse_record, power, sum_powers, sum_valid_ids
from aoc.domain.models import Configuration, GameRecord, Round

__all__ = [
    "CalibrationMode",
    "Configuration",
    "GameRecord",
    "ParseError",
    "Round",
    "is_valid",
    "parse_record",
    "power",
    "sum_calibration_values",
    "sum_powers",
    "sum_valid_ids",
]
