"""duckdash/scenarios/cli — Command-line scenario runner.

Usage::

    python -m duckdash.scenarios.cli scenarios/gap_jump.yaml
    python -m duckdash.scenarios.cli --all
    python -m duckdash.scenarios.cli --all --agent jump_runner -o results/run.json
    python -m duckdash.scenarios.cli --all --compare results/baseline.json

Exit status is 0 when every scenario passes and 1 otherwise; with
``--compare`` it is the comparison's exit code instead.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from duckdash.debug import configure_logging
from duckdash.scenarios.compare import compare_results
from duckdash.scenarios.loader import ScenarioDef, load_scenarios
from duckdash.scenarios.output import print_outcome, print_summary, save_results
from duckdash.scenarios.runner import ScenarioOutcome, run_scenario

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="duckdash-scenarios", description="Run duckdash scenarios",
    )
    parser.add_argument("scenarios", nargs="*", type=Path, help="Scenario YAML files")
    parser.add_argument(
        "--all", action="store_true", help="Run every *.yaml under --dir",
    )
    parser.add_argument(
        "--dir", type=Path, default=Path("scenarios"),
        help="Scenario directory used by --all (default: scenarios/)",
    )
    parser.add_argument("--agent", help="Run every scenario with this agent")
    parser.add_argument(
        "--max-frames", type=int, help="Override the frame limit of every scenario",
    )
    parser.add_argument("--output", "-o", type=Path, help="Write results JSON here")
    parser.add_argument(
        "--trajectory", action="store_true",
        help="Include per-frame records in the results JSON",
    )
    parser.add_argument("--compare", type=Path, help="Baseline results JSON")
    return parser


def _apply_overrides(
    scenario_def: ScenarioDef, agent: str | None, max_frames: int | None,
) -> ScenarioDef:
    if agent:
        scenario_def = replace(scenario_def, agent=agent, agent_params=None)
    if max_frames:
        scenario_def = replace(scenario_def, max_frames=max_frames)
    return scenario_def


def run_all(
    scenario_defs: list[ScenarioDef],
    agent: str | None = None,
    max_frames: int | None = None,
) -> list[ScenarioOutcome]:
    results = []
    for scenario_def in scenario_defs:
        scenario_def = _apply_overrides(scenario_def, agent, max_frames)
        logger.debug("running %s with agent %s", scenario_def.name, scenario_def.agent)
        outcome = run_scenario(scenario_def)
        print_outcome(outcome)
        results.append(outcome)
    return results


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.scenarios and not args.all:
        parser.print_usage()
        sys.exit(2)

    configure_logging()

    scenario_defs = load_scenarios(
        paths=args.scenarios or None, run_all=args.all, base=args.dir,
    )
    results = run_all(scenario_defs, args.agent, args.max_frames)
    print_summary(results)

    if args.output:
        save_results(results, args.output, include_trajectory=args.trajectory)
    if args.compare:
        sys.exit(compare_results(results, args.compare))
    sys.exit(0 if all(r.success for r in results) else 1)


if __name__ == "__main__":
    main()
