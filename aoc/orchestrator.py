"""
Orchestrator for self-checking, running and profiling puzzle solvers.

Usage (example from CLI):
    from aoc.orchestrator import run_solvers

    results = run_solvers(day_names=["day01", "day02"])
    print(results)

Every selected solver's fixture checks run before any puzzle input is solved;
a failing check raises `SelfCheckFailed` and nothing else is computed.

When persisted, outputs are saved to `results/` by default:
- `results/latest.json` (last run)
- `results/run-<timestamp>.json` (timestamped archive)
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional

from aoc.config import get_settings
from aoc.infrastructure.inputs import read_input
from aoc.solvers.abstract import AbstractPuzzleSolver, SolverResult
from aoc.solvers.day01 import CalibrationSolver
from aoc.solvers.day02 import CubeGameSolver
from aoc.utils.logging import get_logger
from aoc.utils.profiler import ProfileStats, profile_block

log = get_logger(__name__)


class SelfCheckFailed(RuntimeError):
    """A solver produced the wrong answer on one of its fixture inputs."""

    def __init__(self, day: str, part: int, fixture: str, expected: int, actual: int) -> None:
        self.day = day
        self.part = part
        self.fixture = fixture
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Self-check failed for {day} part {part} on '{fixture}': "
            f"expected {expected}, got {actual}"
        )


def _round_float(value: float, decimals: int = 4) -> float:
    return round(value, decimals)


def _solver_factories() -> Dict[str, Callable[[], AbstractPuzzleSolver]]:
    """Registry of available solvers."""
    return {
        "day01": lambda: CalibrationSolver(),
        "day02": lambda: CubeGameSolver(),
    }


def available_solvers() -> List[str]:
    """List available solver names."""
    return sorted(_solver_factories().keys())


def _resolve_solver(name: str) -> AbstractPuzzleSolver:
    factories = _solver_factories()
    if name not in factories:
        raise ValueError(f"Unknown solver '{name}'. Available: {', '.join(factories)}")
    return factories[name]()


def _resolve_names(day_names: Optional[Iterable[str]]) -> List[str]:
    names = list(day_names) if day_names is not None else ["all"]
    if len(names) == 1 and names[0] == "all":
        return available_solvers()
    return names


def run_self_checks(solver: AbstractPuzzleSolver, input_dir: Path | str | None = None) -> int:
    """
    Verify `solver` against each of its fixture inputs.

    Returns
    -------
    int
        Number of checks that passed (all of them, otherwise this raises).

    Raises
    ------
    SelfCheckFailed
        A part returned something other than the expected fixture answer.
    """
    for check in solver.checks:
        lines = read_input(check.fixture, input_dir)
        actual = solver.solve(check.part, lines)
        if actual != check.expected:
            log.error(
                f"[CHECK FAILED] {solver.name} part {check.part}",
                extra={
                    "day": solver.name,
                    "fixture": check.fixture,
                    "expected": check.expected,
                    "actual": actual,
                },
            )
            raise SelfCheckFailed(solver.name, check.part, check.fixture, check.expected, actual)
        log.info(
            f"[CHECK OK] {solver.name} part {check.part}",
            extra={"day": solver.name, "fixture": check.fixture},
        )
    return len(solver.checks)


def check_solvers(
    day_names: Optional[Iterable[str]] = None, input_dir: Path | str | None = None
) -> Dict[str, int]:
    """Run the fixture checks of every selected solver; map name to checks passed."""
    return {
        name: run_self_checks(_resolve_solver(name), input_dir)
        for name in _resolve_names(day_names)
    }


def _persist_results(payload: dict, results_dir: Path) -> None:
    results_dir.mkdir(parents=True, exist_ok=True)
    latest_path = results_dir / "latest.json"
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    archive_path = results_dir / f"run-{timestamp}.json"

    for path in (latest_path, archive_path):
        with path.open("w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, sort_keys=True)

    log.info("Results persisted", extra={"latest": str(latest_path), "archive": str(archive_path)})


def _profiled_solve(solver: AbstractPuzzleSolver, input_dir: Path | str | None) -> SolverResult:
    log.info(f"[SOLVER START] {solver.name}", extra={"day": solver.name})
    with profile_block(solver.name) as stats:
        try:
            lines = read_input(solver.input_name, input_dir)
            result = SolverResult(
                part1=solver.part1(lines),
                part2=solver.part2(lines),
                lines=len(lines),
            )
            log.info(
                f"[SOLVER SUCCESS] {solver.name}",
                extra={"day": solver.name, "lines": len(lines)},
            )
        except Exception as exc:  # noqa: BLE001 - intentional broad catch to record failures
            log.exception(f"[SOLVER FAILED] {solver.name}", extra={"day": solver.name})
            result = SolverResult(part1=None, part2=None, lines=0, error=str(exc))

    return _merge_result(result, stats)


def _merge_result(result: SolverResult, stats: ProfileStats) -> SolverResult:
    """Attach profiler measurements to a solver result, rounding floats for readability."""
    merged = SolverResult(**result)
    merged.setdefault("error", None)
    merged["duration_seconds"] = _round_float(stats.duration_seconds)
    merged["peak_rss_bytes"] = stats.peak_rss_bytes
    merged["cpu_percent"] = (
        _round_float(stats.cpu_percent, 1) if stats.cpu_percent is not None else None
    )
    return merged


def run_solvers(
    day_names: Optional[Iterable[str]] = None,
    input_dir: Path | str | None = None,
    results_dir: Path | str | None = None,
    persist: bool = False,
) -> List[SolverResult]:
    """
    Self-check, then solve one or more puzzle days.

    Parameters
    ----------
    day_names : iterable[str] | None
        Solver names to execute. If None or ["all"], executes all available.
    input_dir : Path | str | None
        Directory holding `<name>.txt` inputs. Defaults to settings.input_dir.
    results_dir : Path | str | None
        Directory to store JSON artifacts. Defaults to settings.results_dir.
    persist : bool
        Whether to write results to disk.

    Returns
    -------
    List[SolverResult]
        One result per day, in the requested order.

    Raises
    ------
    SelfCheckFailed
        Any selected solver failed a fixture check; no day is solved.
    ValueError
        An unknown solver name was requested.
    """
    settings = get_settings()
    effective_input_dir = Path(input_dir if input_dir is not None else settings.input_dir)
    names = _resolve_names(day_names)
    solvers = [_resolve_solver(name) for name in names]

    checks_passed = {solver.name: run_self_checks(solver, effective_input_dir) for solver in solvers}

    results: List[SolverResult] = []
    for solver in solvers:
        result = _profiled_solve(solver, effective_input_dir)
        result["day"] = solver.name
        result["checks_passed"] = checks_passed[solver.name]
        results.append(result)
        log.info(
            f"[SOLVER COMPLETE] {solver.name}",
            extra={
                "day": solver.name,
                "part1": result.get("part1"),
                "part2": result.get("part2"),
                "duration": result.get("duration_seconds"),
            },
        )

    if persist:
        payload = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "days": names,
            "results": results,
        }
        target = results_dir if results_dir is not None else settings.results_dir
        _persist_results(payload, Path(target))

    return results


__all__ = [
    "SelfCheckFailed",
    "available_solvers",
    "check_solvers",
    "run_self_checks",
    "run_solvers",
]
