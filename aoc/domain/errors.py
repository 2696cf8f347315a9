"""
Error taxonomy for puzzle input parsing.

Every parse failure is a distinct subclass of `ParseError` tagged with the
stage that rejected the line. Callers can catch the base class to abandon a
line, or a concrete subclass to assert on a specific failure mode.
"""

from __future__ import annotations


class ParseError(ValueError):
    """Base class for all input parsing failures."""

    stage: str = "unknown"

    def __init__(self, text: str, message: str | None = None) -> None:
        self.text = text
        super().__init__(message or f"{self.stage}: cannot parse {text!r}")


class MissingCalibrationValueError(ParseError):
    """A calibration line contains no digit or number word."""

    stage = "calibration"

    def __init__(self, text: str) -> None:
        super().__init__(text, f"No calibration value found in line {text!r}")


class MissingSeparatorError(ParseError):
    """A game line has no colon between its header and its rounds."""

    stage = "separator"

    def __init__(self, text: str) -> None:
        super().__init__(
            text, f"A game line must contain the game name and its rounds: {text!r}"
        )


class InvalidIdentifierError(ParseError):
    stage = "identifier"

    def __init__(self, text: str) -> None:
        super().__init__(text, f"Invalid game id string {text!r}")


class NoRoundsError(ParseError):
    stage = "rounds"

    def __init__(self, text: str) -> None:
        super().__init__(text, f"The game input does not have any round: {text!r}")


class MalformedTokenError(ParseError):
    """A round token does not look like `<count> <color>`."""

    stage = "token"

    def __init__(self, text: str) -> None:
        super().__init__(text, f"Invalid round extraction value: {text!r}")


class UnknownColorError(ParseError):
    stage = "color"

    def __init__(self, text: str, color: str) -> None:
        self.color = color
        super().__init__(text, f"Invalid round extraction value: {text!r}. Unknown color {color!r}")


__all__ = [
    "ParseError",
    "MissingCalibrationValueError",
    "MissingSeparatorError",
    "InvalidIdentifierError",
    "NoRoundsError",
    "MalformedTokenError",
    "UnknownColorError",
]
