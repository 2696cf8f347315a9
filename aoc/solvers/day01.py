"""
Day 1: calibration values hidden in noisy text lines.

Part 1 only counts digit characters; part 2 also counts spelled-out numbers.
"""

from __future__ import annotations

from typing import List

from aoc.domain.calibration import CalibrationMode, sum_calibration_values
from aoc.solvers.abstract import AbstractPuzzleSolver, SelfCheck


class CalibrationSolver(AbstractPuzzleSolver):
    name: str = "day01"
    title: str = "Trebuchet calibration"
    input_name: str = "Day01"
    checks = (
        SelfCheck(fixture="Day01_test", part=1, expected=142),
        SelfCheck(fixture="Day01_test2", part=2, expected=281),
    )

    def part1(self, lines: List[str]) -> int:
        return sum_calibration_values(lines, CalibrationMode.DIGITS)

    def part2(self, lines: List[str]) -> int:
        return sum_calibration_values(lines, CalibrationMode.SPELLED)


__all__ = ["CalibrationSolver"]
