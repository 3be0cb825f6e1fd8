"""tests/harness.py — Headless driving helpers for simulation tests.

Drives a SimState tick by tick with per-tick actions and records a
FrameSnapshot per tick. No Pyxel imports.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from duckdash.agents.actions import ACTION_NOOP, ACTION_RIGHT, apply_action
from duckdash.level import Level
from duckdash.simulation import Event, SimState, create_sim, sim_step, start_or_reset


@dataclass
class FrameSnapshot:
    frame: int
    x: float
    y: float
    x_vel: float
    y_vel: float
    is_jumping: bool
    is_charging: bool
    lives: int
    level_index: int
    phase: str


@dataclass
class RunResult:
    sim: SimState
    snapshots: list[FrameSnapshot] = field(default_factory=list)
    events_per_frame: list[list[Event]] = field(default_factory=list)

    def first_frame_with(self, event_type: type) -> int | None:
        for i, events in enumerate(self.events_per_frame):
            if any(isinstance(e, event_type) for e in events):
                return i
        return None


def playing_sim(levels: tuple[Level, ...] | None = None) -> SimState:
    """A fresh session already in the PLAYING phase."""
    sim = create_sim(levels) if levels is not None else create_sim()
    start_or_reset(sim)
    return sim


def _snap(sim: SimState) -> FrameSnapshot:
    a = sim.actor
    return FrameSnapshot(
        frame=sim.frame,
        x=a.x,
        y=a.y,
        x_vel=a.x_vel,
        y_vel=a.y_vel,
        is_jumping=a.is_jumping,
        is_charging=a.is_charging,
        lives=sim.session.lives,
        level_index=sim.session.level_index,
        phase=sim.session.phase.value,
    )


def run_actions(sim: SimState, actions: list[int]) -> RunResult:
    """Apply one action per tick and record the state after each tick."""
    result = RunResult(sim=sim)
    jump_held = False
    for action in actions:
        jump_held = apply_action(sim, action, jump_held)
        events = sim_step(sim)
        result.snapshots.append(_snap(sim))
        result.events_per_frame.append(events)
    return result


def hold_right(sim: SimState, ticks: int) -> RunResult:
    return run_actions(sim, [ACTION_RIGHT] * ticks)


def idle(sim: SimState, ticks: int) -> RunResult:
    return run_actions(sim, [ACTION_NOOP] * ticks)
