"""
Abstract solver interfaces and result contracts for the puzzle runner.

Each puzzle day implements the PuzzleSolver protocol: two parts that reduce a
list of input lines to an integer, plus the fixture checks that must pass
before the full puzzle input is solved.
"""

from __future__ import annotations

import abc
from typing import List, NamedTuple, Optional, Protocol, Sequence, TypedDict, runtime_checkable


class SelfCheck(NamedTuple):
    """Expected answer of one part on a small fixture input."""

    fixture: str
    part: int
    expected: int


class SolverResult(TypedDict, total=False):
    """
    Per-day record produced by the orchestrator.

    Fields are optional: a day whose input is missing only carries `error`.
    """

    day: str
    part1: Optional[int]
    part2: Optional[int]
    lines: int
    checks_passed: int
    duration_seconds: float
    peak_rss_bytes: Optional[int]
    cpu_percent: Optional[float]
    error: Optional[str]


@runtime_checkable
class PuzzleSolver(Protocol):
    """
    Common interface all puzzle solvers implement.

    Attributes
    ----------
    name : str
        Machine-friendly identifier, also the input file stem (e.g. "day01").
    title : str
        Human-friendly puzzle title.
    input_name : str
        Stem of the full puzzle input file (e.g. "Day01").
    checks : Sequence[SelfCheck]
        Fixture expectations verified before solving `input_name`.
    """

    name: str
    title: str
    input_name: str
    checks: Sequence[SelfCheck]

    def part1(self, lines: List[str]) -> int:
        ...

    def part2(self, lines: List[str]) -> int:
        ...


class AbstractPuzzleSolver(abc.ABC):
    """
    ABC helper for class-based solvers.

    Subclasses set the class attributes and implement both parts.
    """

    name: str
    title: str
    input_name: str
    checks: Sequence[SelfCheck] = ()

    @abc.abstractmethod
    def part1(self, lines: List[str]) -> int:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    def part2(self, lines: List[str]) -> int:  # pragma: no cover - interface only
        raise NotImplementedError

    def solve(self, part: int, lines: List[str]) -> int:
        if part == 1:
            return self.part1(lines)
        if part == 2:
            return self.part2(lines)
        raise ValueError(f"Unknown part {part} for {self.name}; expected 1 or 2")


__all__ = [
    "AbstractPuzzleSolver",
    "PuzzleSolver",
    "SelfCheck",
    "SolverResult",
]
