"""duckdash/scenarios/loader — ScenarioDef and YAML loading.

A scenario file is one YAML mapping. Required keys: ``name``, ``agent``,
``max_frames``, ``success``, ``failure``. Optional: ``description``,
``agent_params``, ``metrics``, ``start_override`` and ``levels``, an inline
level list that replaces the built-in catalog.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

from duckdash.level import Level, levels_from_list
from duckdash.scenarios.conditions import (
    VALID_FAILURE_TYPES,
    VALID_SUCCESS_TYPES,
    FailureCondition,
    StartOverride,
    SuccessCondition,
)


@dataclass
class ScenarioDef:
    name: str
    description: str
    agent: str
    agent_params: dict | None
    max_frames: int
    success: SuccessCondition
    failure: FailureCondition
    metrics: list[str]
    start_override: StartOverride | None = None
    levels: tuple[Level, ...] | None = None


def _condition_type(data: dict, valid: frozenset[str], kind: str) -> str:
    ctype = data["type"]
    if ctype not in valid:
        raise ValueError(
            f"Unknown {kind} condition type: {ctype!r}. Valid: {sorted(valid)}"
        )
    return ctype


_NEEDS_VALUE = frozenset({"level_reached", "position_x_gte"})


def parse_success(data: dict) -> SuccessCondition:
    ctype = _condition_type(data, VALID_SUCCESS_TYPES, "success")
    if ctype in _NEEDS_VALUE and data.get("value") is None:
        raise ValueError(f"Success condition {ctype!r} requires a value")
    return SuccessCondition(
        type=ctype,
        value=data.get("value"),
        level=data.get("level"),
    )


def parse_failure(data: dict) -> FailureCondition:
    """Parse a failure condition; ``any`` nests a list of sub-conditions."""
    ctype = _condition_type(data, VALID_FAILURE_TYPES, "failure")
    nested = None
    if ctype == "any":
        nested = [parse_failure(sub) for sub in data.get("conditions", [])]
    return FailureCondition(
        type=ctype,
        tolerance=data.get("tolerance"),
        window=data.get("window"),
        conditions=nested,
    )


def parse_scenario(data: dict) -> ScenarioDef:
    """Build a ScenarioDef from a parsed YAML mapping.

    Raises:
        KeyError: If a required key is missing.
        ValueError: If a condition or obstacle type is not recognized, or a
            success condition is missing the value it compares against.
    """
    override = data.get("start_override")
    levels = data.get("levels")
    return ScenarioDef(
        name=data["name"],
        description=data.get("description", ""),
        agent=data["agent"],
        agent_params=data.get("agent_params"),
        max_frames=int(data["max_frames"]),
        success=parse_success(data["success"]),
        failure=parse_failure(data["failure"]),
        metrics=list(data.get("metrics", [])),
        start_override=(
            StartOverride(x=float(override["x"]), level=int(override.get("level", 0)))
            if override is not None else None
        ),
        levels=levels_from_list(levels) if levels is not None else None,
    )


def load_scenario(path: Path | str) -> ScenarioDef:
    with open(path) as f:
        return parse_scenario(yaml.safe_load(f))


def load_scenarios(
    paths: list[Path] | None = None,
    run_all: bool = False,
    base: Path = Path("scenarios"),
) -> list[ScenarioDef]:
    """Load the given files, or every ``*.yaml`` under *base* with *run_all*."""
    if run_all:
        paths = sorted(Path(base).glob("*.yaml"))
    return [load_scenario(p) for p in paths or []]
