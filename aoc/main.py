from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional

import typer

from aoc.config import get_settings
from aoc.orchestrator import SelfCheckFailed, available_solvers, check_solvers, run_solvers
from aoc.reporter import print_results
from aoc.utils.logging import configure_logging

app = typer.Typer(help="Advent puzzle runner CLI.")


def _setup_logging() -> None:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)


def _require_known_day(day: str) -> None:
    if day != "all" and day not in available_solvers():
        typer.echo(
            f"Unknown solver '{day}'. Available: {', '.join(available_solvers())}", err=True
        )
        raise typer.Exit(code=2)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"inputs={settings.input_dir} results={settings.results_dir} | "
        f"bag red={settings.game_max_red} green={settings.game_max_green} "
        f"blue={settings.game_max_blue} | log={settings.log_level}"
    )


@app.command("list")
def list_solvers() -> None:
    """
    List available solvers.
    """
    typer.echo("Available solvers: " + ", ".join(available_solvers()))


@app.command()
def check(
    day: str = typer.Option("all", "--day", "-d", help="Solver to check (e.g. day01, all)."),
    input_dir: Optional[Path] = typer.Option(None, "--input-dir", "-i", help="Override input directory."),
) -> None:
    """
    Run fixture self-checks only.
    """
    _require_known_day(day)
    _setup_logging()
    try:
        passed = check_solvers([day], input_dir)
    except SelfCheckFailed as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)
    for name, count in passed.items():
        typer.echo(f"{name}: {count} check(s) passed")


@app.command()
def run(
    day: str = typer.Option(
        "all",
        "--day",
        "-d",
        help="Solver to run (e.g. day01, day02, all).",
    ),
    input_dir: Optional[Path] = typer.Option(
        None,
        "--input-dir",
        "-i",
        help="Override input directory (default from settings).",
    ),
    report: bool = typer.Option(False, "--report", help="Render a results table instead of bare answers."),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON."),
    persist: bool = typer.Option(False, "--persist", help="Write results JSON to the results directory."),
) -> None:
    """
    Self-check, then solve the selected puzzle days and print both parts.
    """
    _require_known_day(day)
    _setup_logging()
    try:
        results = run_solvers(day_names=[day], input_dir=input_dir, persist=persist)
    except SelfCheckFailed as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)
    except KeyboardInterrupt:
        # click turns an interrupt inside a command into "Aborted!" with exit 1
        typer.echo("Cancelled by user.", err=True)
        raise typer.Exit(code=130)

    if report:
        print_results(results)
    elif as_json:
        typer.echo(json.dumps(results, indent=2))
    else:
        for result in results:
            if result.get("error"):
                typer.echo(f"{result['day']}: {result['error']}", err=True)
                continue
            typer.echo(result["part1"])
            typer.echo(result["part2"])


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
