"""
Synthetic cube game generator.

Writes deterministic pseudo-random game records in canonical form
(``Game N: 3 red, 4 blue; 2 green``), useful for load testing the day 2
solver on inputs far larger than the puzzle's.
"""

from __future__ import annotations

import random
import sys
import time
from pathlib import Path
from typing import List

import typer

from aoc.domain.models import GameRecord, Round

app = typer.Typer(help="Generate synthetic cube game records.")


def _generate_records(
    count: int, max_rounds: int, max_cubes: int, seed: int
) -> List[GameRecord]:
    rng = random.Random(seed)
    records: List[GameRecord] = []
    for game_id in range(1, count + 1):
        rounds = tuple(
            Round(
                red=rng.randint(0, max_cubes),
                green=rng.randint(0, max_cubes),
                blue=rng.randint(0, max_cubes),
            )
            for _ in range(rng.randint(1, max_rounds))
        )
        records.append(GameRecord(id=game_id, rounds=rounds))
    return records


def _write_records(path: Path, records: List[GameRecord]) -> None:
    with path.open("w", encoding="utf-8") as f:
        for record in records:
            f.write(record.to_line() + "\n")


@app.command()
def main(
    games: int = typer.Option(100, "--games", "-g", help="Number of games to generate."),
    max_rounds: int = typer.Option(6, "--max-rounds", help="Maximum rounds per game."),
    max_cubes: int = typer.Option(20, "--max-cubes", help="Maximum cubes of one color per round."),
    seed: int = typer.Option(42, "--seed", help="Deterministic RNG seed."),
    output: Path = typer.Option(Path("inputs/Day02_synthetic.txt"), "--output", "-o", help="Output path."),
) -> None:
    """
    Generate synthetic game records and write them one per line.
    """
    start = time.perf_counter()
    output.parent.mkdir(parents=True, exist_ok=True)
    records = _generate_records(games, max_rounds=max_rounds, max_cubes=max_cubes, seed=seed)
    _write_records(output, records)
    duration = time.perf_counter() - start
    typer.echo(f"Wrote {games:,} games -> {output} in {duration:.2f}s (seed={seed})")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
