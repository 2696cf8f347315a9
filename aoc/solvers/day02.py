"""
Day 2: cube games.

Part 1 sums the ids of games possible with the configured bag; part 2 sums
each game's power, which does not depend on the bag.
"""

from __future__ import annotations

from typing import List, Optional

from aoc.config import get_settings
from aoc.domain.games import parse_records, sum_powers, sum_valid_ids
from aoc.domain.models import Configuration
from aoc.solvers.abstract import AbstractPuzzleSolver, SelfCheck
from aoc.utils.logging import get_logger

log = get_logger(__name__)


class CubeGameSolver(AbstractPuzzleSolver):
    """
    Parse every line into a `GameRecord` and reduce.

    The bag limits default to the `GAME_MAX_*` settings; pass a
    `Configuration` to override them.
    """

    name: str = "day02"
    title: str = "Cube conundrum"
    input_name: str = "Day02"
    checks = (
        SelfCheck(fixture="Day02_test", part=1, expected=8),
        SelfCheck(fixture="Day02_test", part=2, expected=2286),
    )

    def __init__(self, configuration: Optional[Configuration] = None) -> None:
        self.configuration = configuration or get_settings().game_configuration()

    def part1(self, lines: List[str]) -> int:
        records = parse_records(lines)
        log.debug(
            "Validating games",
            extra={
                "games": len(records),
                "max_red": self.configuration.red,
                "max_green": self.configuration.green,
                "max_blue": self.configuration.blue,
            },
        )
        return sum_valid_ids(records, self.configuration)

    def part2(self, lines: List[str]) -> int:
        return sum_powers(parse_records(lines))


__all__ = ["CubeGameSolver"]
