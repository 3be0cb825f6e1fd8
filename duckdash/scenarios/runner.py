"""duckdash/scenarios/runner — Runs a ScenarioDef and scores the result.

Each frame: observe → agent acts → action becomes intents and jump edges →
one simulation tick → reward → record → check conditions. The run stops on the
first verdict or at ``max_frames``.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable

from duckdash.agents.actions import apply_action
from duckdash.agents.registry import resolve_agent
from duckdash.camera import camera_offset_for
from duckdash.constants import ACTOR_WIDTH
from duckdash.level import LEVELS
from duckdash.observation import extract_observation
from duckdash.reward import compute_reward, total_progress
from duckdash.scenarios.conditions import (
    DEFAULT_STUCK_TOLERANCE,
    DEFAULT_STUCK_WINDOW,
    StartOverride,
    check_conditions,
)
from duckdash.scenarios.loader import ScenarioDef
from duckdash.simulation import Event, SimState, create_sim, sim_step, start_or_reset

logger = logging.getLogger(__name__)


@dataclass
class FrameRecord:
    """State after one frame, plus the action that produced it."""

    frame: int
    x: float
    y: float
    x_vel: float
    y_vel: float
    is_jumping: bool
    is_charging: bool
    lives: int
    level_index: int
    camera_offset: float
    phase: str
    action: int
    reward: float
    events: list[str]


@dataclass
class ScenarioOutcome:
    name: str
    success: bool
    reason: str
    frames_elapsed: int
    metrics: dict[str, Any]
    trajectory: list[FrameRecord]
    wall_time_ms: float


# ---------------------------------------------------------------------------
# Metrics
# ---------------------------------------------------------------------------

MetricFn = Callable[[list[FrameRecord], SimState, bool], Any]
METRICS: dict[str, MetricFn] = {}


def metric(name: str) -> Callable[[MetricFn], MetricFn]:
    def register(fn: MetricFn) -> MetricFn:
        METRICS[name] = fn
        return fn
    return register


@metric("completion_time")
def _completion_time(trajectory, sim, success):
    return len(trajectory) if success else None


@metric("max_x")
def _max_x(trajectory, sim, success):
    return max((r.x for r in trajectory), default=0.0)


@metric("lives_lost")
def _lives_lost(trajectory, sim, success):
    return sim.lives_lost


@metric("levels_cleared")
def _levels_cleared(trajectory, sim, success):
    return sim.levels_cleared


@metric("total_reward")
def _total_reward(trajectory, sim, success):
    return sum(r.reward for r in trajectory)


@metric("time_airborne")
def _time_airborne(trajectory, sim, success):
    """Fraction of frames spent in the air."""
    if not trajectory:
        return 0.0
    return sum(r.is_jumping for r in trajectory) / len(trajectory)


@metric("stuck_at")
def _stuck_at(trajectory, sim, success):
    """Final x if the last DEFAULT_STUCK_WINDOW frames barely moved, else None."""
    tail = [r.x for r in trajectory[-DEFAULT_STUCK_WINDOW:]]
    if tail and max(tail) - min(tail) < DEFAULT_STUCK_TOLERANCE:
        return tail[-1]
    return None


@metric("x_profile")
def _x_profile(trajectory, sim, success):
    return [r.x for r in trajectory]


def compute_metrics(
    requested: list[str],
    trajectory: list[FrameRecord],
    sim: SimState,
    success: bool,
) -> dict[str, Any]:
    """Evaluate the named metrics. An unknown name raises ValueError."""
    unknown = [name for name in requested if name not in METRICS]
    if unknown:
        raise ValueError(f"Unknown metric: {unknown[0]!r}. Valid metrics: {sorted(METRICS)}")
    return {name: METRICS[name](trajectory, sim, success) for name in requested}


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------


def _place_actor(sim: SimState, override: StartOverride) -> None:
    """Move the actor to the override's level and x, clamped into that level."""
    if not 0 <= override.level < len(sim.levels):
        raise ValueError(
            f"start_override level {override.level} out of range "
            f"(catalog has {len(sim.levels)} levels)"
        )
    level = sim.levels[override.level]
    x = max(0.0, min(override.x, level.ground_width - ACTOR_WIDTH))
    sim.session.level_index = override.level
    sim.actor.x = x
    sim.session.camera_offset = camera_offset_for(x)
    sim.max_x_reached = x


def _record(
    sim: SimState, frame: int, action: int, reward: float, events: list[Event],
) -> FrameRecord:
    a = sim.actor
    return FrameRecord(
        frame=frame,
        x=a.x,
        y=a.y,
        x_vel=a.x_vel,
        y_vel=a.y_vel,
        is_jumping=a.is_jumping,
        is_charging=a.is_charging,
        lives=sim.session.lives,
        level_index=sim.session.level_index,
        camera_offset=sim.session.camera_offset,
        phase=sim.session.phase.value,
        action=action,
        reward=reward,
        events=[type(e).__name__ for e in events],
    )


def run_scenario(scenario_def: ScenarioDef) -> ScenarioOutcome:
    """Run one scenario to its first verdict or its frame limit."""
    sim = create_sim(scenario_def.levels or LEVELS)
    start_or_reset(sim)
    if scenario_def.start_override is not None:
        _place_actor(sim, scenario_def.start_override)

    agent = resolve_agent(scenario_def.agent, scenario_def.agent_params)
    agent.reset()

    trajectory: list[FrameRecord] = []
    verdict: bool | None = None
    reason = "timed_out"
    jump_held = False

    started = time.perf_counter()
    for frame in range(scenario_def.max_frames):
        action = agent.act(extract_observation(sim))
        jump_held = apply_action(sim, action, jump_held)

        before = total_progress(sim)
        events = sim_step(sim)
        reward = compute_reward(sim, events, before, frame + 1, scenario_def.max_frames)
        trajectory.append(_record(sim, frame, action, reward, events))

        verdict, why = check_conditions(
            scenario_def.success, scenario_def.failure,
            sim, trajectory, frame, scenario_def.max_frames,
        )
        if verdict is not None:
            reason = why
            break
    wall_time_ms = (time.perf_counter() - started) * 1000

    logger.debug(
        "%s: %s after %d frames", scenario_def.name, reason, len(trajectory),
    )
    return ScenarioOutcome(
        name=scenario_def.name,
        success=verdict is True,
        reason=reason,
        frames_elapsed=len(trajectory),
        metrics=compute_metrics(scenario_def.metrics, trajectory, sim, verdict is True),
        trajectory=trajectory,
        wall_time_ms=wall_time_ms,
    )
