"""duckdash/scenarios/compare — Baseline comparison and regression detection.

A baseline is a results file written by ``save_results``. Each metric has a
preferred direction; a move the wrong way by more than the threshold (as a
fraction of the baseline value) is a regression.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from duckdash.scenarios.runner import ScenarioOutcome

# +1: higher is better, -1: lower is better, 0: informational only.
METRIC_DIRECTION: dict[str, int] = {
    "completion_time": -1,
    "max_x": +1,
    "lives_lost": -1,
    "levels_cleared": +1,
    "total_reward": +1,
    "time_airborne": 0,
    "stuck_at": 0,
}

EXIT_OK = 0
EXIT_STATUS_REGRESSION = 1
EXIT_METRIC_REGRESSION = 2


@dataclass
class MetricDelta:
    name: str
    old: float | None
    new: float | None

    @property
    def relative(self) -> float | None:
        """Signed change as a fraction of the old value, None if undefined."""
        if self.old is None or self.new is None or self.old == 0:
            return None
        return (self.new - self.old) / abs(self.old)

    def verdict(self, threshold: float) -> str:
        """``"improved"``, ``"regressed"`` or ``""``."""
        rel = self.relative
        direction = METRIC_DIRECTION.get(self.name, 0)
        if rel is None or direction == 0:
            return ""
        score = rel * direction
        if score > threshold:
            return "improved"
        if score < -threshold:
            return "regressed"
        return ""


def is_regression(
    metric: str, old_val: float, new_val: float, threshold: float = 0.05,
) -> bool:
    return MetricDelta(metric, old_val, new_val).verdict(threshold) == "regressed"


def diff_metrics(old: dict, new: dict) -> list[MetricDelta]:
    """Scalar metrics present on both sides, sorted by name."""
    deltas = []
    for name in sorted(old.keys() & new.keys()):
        if isinstance(old[name], list) or isinstance(new[name], list):
            continue
        deltas.append(MetricDelta(name, old[name], new[name]))
    return deltas


def _format_delta(delta: MetricDelta, threshold: float) -> str:
    def fmt(v):
        return f"{v:.1f}" if isinstance(v, float) else str(v)

    line = f"  {delta.name:<18s} {fmt(delta.old):>9s} → {fmt(delta.new):<9s}"
    if delta.relative is not None:
        line += f" ({delta.relative * 100:+.1f}%)"
    verdict = delta.verdict(threshold)
    if verdict:
        line += f"  {verdict}"
    return line


def compare_results(
    current: list[ScenarioOutcome],
    baseline_path: Path | str,
    threshold: float = 0.05,
) -> int:
    """Print a comparison against a baseline file and return an exit code.

    ``EXIT_STATUS_REGRESSION`` if any scenario went from pass to fail,
    otherwise ``EXIT_METRIC_REGRESSION`` if any metric regressed beyond the
    threshold, otherwise ``EXIT_OK``.
    """
    with open(baseline_path) as f:
        baseline = {entry["name"]: entry for entry in json.load(f)}
    current_by_name = {o.name: o for o in current}

    status_regressed = False
    metric_regressed = False

    for name in sorted(baseline.keys() | current_by_name.keys()):
        if name not in current_by_name:
            print(f"{name}: missing from current run")
            continue
        if name not in baseline:
            print(f"{name}: new scenario")
            continue

        outcome = current_by_name[name]
        was_passing = bool(baseline[name]["success"])
        if was_passing and not outcome.success:
            print(f"{name}: PASS → FAIL")
            status_regressed = True
        elif outcome.success and not was_passing:
            print(f"{name}: FAIL → PASS")

        lines = []
        for delta in diff_metrics(baseline[name].get("metrics", {}), outcome.metrics):
            lines.append(_format_delta(delta, threshold))
            if delta.verdict(threshold) == "regressed":
                metric_regressed = True
        if lines:
            print(f"{name}:")
            print("\n".join(lines))

    if status_regressed:
        return EXIT_STATUS_REGRESSION
    if metric_regressed:
        return EXIT_METRIC_REGRESSION
    return EXIT_OK
