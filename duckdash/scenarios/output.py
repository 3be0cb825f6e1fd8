"""duckdash/scenarios/output — Console reporting and JSON results files."""

from __future__ import annotations

import json
import sys
from dataclasses import asdict
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from duckdash.scenarios.runner import ScenarioOutcome

# Metrics shown on the one-line report, in display order.
SUMMARY_METRICS = ("levels_cleared", "lives_lost", "max_x", "completion_time")

_ANSI = {"PASS": "\033[32m", "FAIL": "\033[31m"}
_ANSI_RESET = "\033[0m"


def _use_color() -> bool:
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def _status(success: bool) -> str:
    label = "PASS" if success else "FAIL"
    if _use_color():
        return f"{_ANSI[label]}{label}{_ANSI_RESET}"
    return label


def _metric_text(name: str, value: object) -> str:
    if isinstance(value, float):
        return f"{name}={value:.1f}"
    return f"{name}={value}"


def format_outcome(outcome: ScenarioOutcome) -> str:
    """One report line: status, name, frames, wall time, reason, key metrics."""
    fields = [
        _status(outcome.success),
        f"{outcome.name:<28s}",
        f"{outcome.frames_elapsed:>5d}f",
        f"{outcome.wall_time_ms:>7.1f}ms",
        f"{outcome.reason:<15s}",
    ]
    fields.extend(
        _metric_text(name, outcome.metrics[name])
        for name in SUMMARY_METRICS
        if outcome.metrics.get(name) is not None
    )
    return "  ".join(fields)


def print_outcome(outcome: ScenarioOutcome) -> None:
    print(format_outcome(outcome))


def print_summary(results: list[ScenarioOutcome]) -> None:
    passed = sum(r.success for r in results)
    failed = len(results) - passed
    print(f"\n{len(results)} scenarios: {passed} passed, {failed} failed")


def save_results(
    results: list[ScenarioOutcome],
    path: Path | str,
    include_trajectory: bool = False,
) -> None:
    """Write outcomes as a JSON list; trajectories only on request."""
    records = []
    for outcome in results:
        record = asdict(outcome)
        if not include_trajectory:
            del record["trajectory"]
        records.append(record)

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(records, f, indent=2)
        f.write("\n")
