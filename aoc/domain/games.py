"""
Cube game parsing and scoring (day 2).

Lines look like ``Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red``. Parsing
happens in stages (separator, identifier, rounds, tokens, colors) and each
stage raises its own `ParseError` subclass, so a bad line is rejected as a
whole and the failing stage is visible to the caller.
"""

from __future__ import annotations

import math
import re
from typing import Dict, Iterable, List

from aoc.domain.errors import (
    InvalidIdentifierError,
    MalformedTokenError,
    MissingSeparatorError,
    NoRoundsError,
    UnknownColorError,
)
from aoc.domain.models import COLORS, Configuration, GameRecord, Round

GAME_ID_PATTERN = re.compile(r"Game\s+(?P<id>[0-9]+)")
CUBE_AMOUNT_PATTERN = re.compile(r"(?P<count>[0-9]+)\s+(?P<color>\w+)")


def parse_identifier(header: str) -> int:
    match = GAME_ID_PATTERN.search(header)
    if match is None:
        raise InvalidIdentifierError(header)
    return int(match.group("id"))


def parse_round(clause: str) -> Round:
    """
    Parse one clause (``1 red, 2 green, 6 blue``) into a `Round`.

    A color repeated within the clause keeps its last count.
    """
    counts: Dict[str, int] = {}
    for token in clause.split(","):
        match = CUBE_AMOUNT_PATTERN.fullmatch(token.strip())
        if match is None:
            raise MalformedTokenError(token)
        color = match.group("color")
        if color not in COLORS:
            raise UnknownColorError(token, color)
        counts[color] = int(match.group("count"))
    return Round(**counts)


def parse_rounds(body: str) -> List[Round]:
    body = body.strip()
    if not body:
        raise NoRoundsError(body)
    return [parse_round(clause) for clause in body.split(";")]


def parse_record(line: str) -> GameRecord:
    """
    Build a `GameRecord` from one raw input line.

    Raises
    ------
    ParseError
        One of its subclasses, depending on the stage that rejected the line.
    """
    header, separator, body = line.partition(":")
    if not separator:
        raise MissingSeparatorError(line)
    game_id = parse_identifier(header)
    return GameRecord(id=game_id, rounds=tuple(parse_rounds(body)))


def parse_records(lines: Iterable[str]) -> List[GameRecord]:
    return [parse_record(line) for line in lines]


def is_valid(record: GameRecord, configuration: Configuration) -> bool:
    """True when no single round shows more cubes of a color than allowed."""
    return all(r.fits(configuration) for r in record.rounds)


def power(record: GameRecord) -> int:
    bag = record.minimum_bag()
    return math.prod(getattr(bag, color) for color in COLORS)


def sum_valid_ids(records: Iterable[GameRecord], configuration: Configuration) -> int:
    return sum(record.id for record in records if is_valid(record, configuration))


def sum_powers(records: Iterable[GameRecord]) -> int:
    return sum(power(record) for record in records)


__all__ = [
    "parse_identifier",
    "parse_round",
    "parse_rounds",
    "parse_record",
    "parse_records",
    "is_valid",
    "power",
    "sum_valid_ids",
    "sum_powers",
]
