"""
Calibration value extraction (day 1).

Each line hides a two-digit value made of its first and last digit. In
`CalibrationMode.SPELLED` the words "one" to "nine" count as digits too, and
overlapping words such as "twone" must both be reported. The word alternative
is a zero-width lookahead so a match never consumes the letters the next word
starts with.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Iterable, List

from aoc.domain.errors import MissingCalibrationValueError

NUMBER_WORDS = ("one", "two", "three", "four", "five", "six", "seven", "eight", "nine")

DIGIT_PATTERN = re.compile(r"[0-9]")
DIGIT_OR_WORD_PATTERN = re.compile(
    r"(?P<digit>[0-9])|(?=(?P<word>" + "|".join(NUMBER_WORDS) + r"))"
)


class CalibrationMode(str, Enum):
    DIGITS = "digits"
    SPELLED = "spelled"


def _word_value(word: str) -> int:
    return NUMBER_WORDS.index(word) + 1


def find_occurrences(line: str, mode: CalibrationMode = CalibrationMode.DIGITS) -> List[int]:
    """
    Return the digit values found in `line`, in order of their start position.
    """
    if mode is CalibrationMode.DIGITS:
        return [int(m.group()) for m in DIGIT_PATTERN.finditer(line)]

    values: List[int] = []
    for match in DIGIT_OR_WORD_PATTERN.finditer(line):
        digit = match.group("digit")
        if digit is not None:
            values.append(int(digit))
        else:
            values.append(_word_value(match.group("word")))
    return values


def extract_value(line: str, mode: CalibrationMode = CalibrationMode.DIGITS) -> int:
    """
    Concatenate the first and last occurrence of `line` into a two-digit number.

    Raises
    ------
    MissingCalibrationValueError
        The line holds no digit (or number word in spelled mode).
    """
    values = find_occurrences(line, mode)
    if not values:
        raise MissingCalibrationValueError(line)
    return int(f"{values[0]}{values[-1]}")


def extract_digits_value(line: str) -> int:
    return extract_value(line, CalibrationMode.DIGITS)


def extract_spelled_value(line: str) -> int:
    return extract_value(line, CalibrationMode.SPELLED)


def sum_calibration_values(
    lines: Iterable[str], mode: CalibrationMode = CalibrationMode.DIGITS
) -> int:
    return sum(extract_value(line, mode) for line in lines)


__all__ = [
    "NUMBER_WORDS",
    "CalibrationMode",
    "find_occurrences",
    "extract_value",
    "extract_digits_value",
    "extract_spelled_value",
    "sum_calibration_values",
]
