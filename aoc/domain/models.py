"""
Domain models for the cube game puzzle.

A game line such as ``Game 1: 3 blue, 4 red; 1 red, 2 green`` becomes a
`GameRecord` holding one `Round` per semicolon-separated clause. A
`Configuration` holds the per-color maxima a record is validated against.
All models are frozen: a record is either fully built or not built at all.
"""
from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, Field

COLORS: Tuple[str, ...] = ("red", "green", "blue")


class Configuration(BaseModel):
    """
    Maximum number of cubes of each color a single round may show.
    """

    red: int = Field(..., ge=0, description="Maximum red cubes per round.")
    green: int = Field(..., ge=0, description="Maximum green cubes per round.")
    blue: int = Field(..., ge=0, description="Maximum blue cubes per round.")

    model_config = {"frozen": True}


class Round(BaseModel):
    """
    Cubes revealed in one draw. Colors not mentioned in the clause are zero.
    """

    red: int = Field(0, ge=0)
    green: int = Field(0, ge=0)
    blue: int = Field(0, ge=0)

    model_config = {"frozen": True}

    def fits(self, configuration: Configuration) -> bool:
        return (
            self.red <= configuration.red
            and self.green <= configuration.green
            and self.blue <= configuration.blue
        )

    def to_clause(self) -> str:
        """Render as ``3 red, 4 blue``; an empty round renders as ``0 red``."""
        parts = [f"{getattr(self, color)} {color}" for color in COLORS if getattr(self, color)]
        return ", ".join(parts) if parts else "0 red"


class GameRecord(BaseModel):
    """
    One parsed game: its identifier and the rounds in input order.
    """

    id: int = Field(..., ge=0, description="Game identifier from the line header.")
    rounds: Tuple[Round, ...] = Field(default=(), description="Rounds in input order.")

    model_config = {"frozen": True}

    def minimum_bag(self) -> Round:
        """
        Smallest bag that could have produced every round, i.e. the per-color
        maxima across rounds.
        """
        return Round(
            red=max((r.red for r in self.rounds), default=0),
            green=max((r.green for r in self.rounds), default=0),
            blue=max((r.blue for r in self.rounds), default=0),
        )

    def to_line(self) -> str:
        clauses = "; ".join(r.to_clause() for r in self.rounds)
        return f"Game {self.id}: {clauses}"


__all__ = ["COLORS", "Configuration", "Round", "GameRecord"]
