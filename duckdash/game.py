"""duckdash/game.py — Host-facing facade over a SimState.

The Pyxel host talks to the core only through GameCore: input edges in,
read-only state out. The renderer never mutates what it reads.
"""

from __future__ import annotations

from duckdash.actor import ActorSnapshot
from duckdash.level import LEVELS, Level
from duckdash.simulation import (
    Event,
    GamePhase,
    SimState,
    actor_snapshot,
    create_sim,
    current_level,
    press_jump,
    release_jump,
    set_movement_intent,
    sim_step,
    start_or_reset,
)


class GameCore:
    """One play session wrapped in the host's input/output calls."""

    def __init__(self, levels: tuple[Level, ...] = LEVELS) -> None:
        self.sim: SimState = create_sim(levels)

    # Inbound -------------------------------------------------------------

    def set_movement_intent(self, left: bool, right: bool) -> None:
        set_movement_intent(self.sim, left, right)

    def press_jump(self) -> bool:
        return press_jump(self.sim)

    def release_jump(self) -> bool:
        return release_jump(self.sim)

    def tick(self) -> list[Event]:
        return sim_step(self.sim)

    def start_or_reset(self) -> None:
        start_or_reset(self.sim)

    # Outbound ------------------------------------------------------------

    @property
    def phase(self) -> GamePhase:
        return self.sim.session.phase

    @property
    def lives(self) -> int:
        return self.sim.session.lives

    @property
    def camera_offset(self) -> float:
        return self.sim.session.camera_offset

    @property
    def level_index(self) -> int:
        return self.sim.session.level_index

    def actor_snapshot(self) -> ActorSnapshot:
        return actor_snapshot(self.sim)

    def current_level(self) -> Level:
        return current_level(self.sim)
