from __future__ import annotations

from typing import Any, Dict, List

from rich import box
from rich.console import Console
from rich.table import Table


def _format_answer(value: Any) -> str:
    return "-" if value is None else str(value)


def print_results(results: List[Dict[str, Any]], console: Console | None = None) -> None:
    """
    Render solver results as a rich table, one row per puzzle day.
    """
    console = console or Console()

    if not results:
        console.print("[yellow]No results to display.[/yellow]")
        return

    table = Table(title="Puzzle Results", box=box.ROUNDED)

    table.add_column("Day", style="cyan", no_wrap=True)
    table.add_column("Lines", justify="right", style="magenta")
    table.add_column("Part 1", justify="right", style="bold green")
    table.add_column("Part 2", justify="right", style="bold green")
    table.add_column("Checks", justify="right", style="blue")
    table.add_column("Duration (ms)", justify="right", style="green")
    table.add_column("Peak Memory (MB)", justify="right", style="yellow")
    table.add_column("Status", style="red")

    for res in results:
        duration_ms = (res.get("duration_seconds") or 0.0) * 1000
        mem_bytes = res.get("peak_rss_bytes") or 0
        error = res.get("error")
        table.add_row(
            res.get("day", "Unknown"),
            f"{res.get('lines', 0):,}",
            _format_answer(res.get("part1")),
            _format_answer(res.get("part2")),
            str(res.get("checks_passed", 0)),
            f"{duration_ms:.2f}",
            f"{mem_bytes / (1024 * 1024):.2f}",
            f"[red]{error}[/red]" if error else "[green]ok[/green]",
        )

    console.print(table)
