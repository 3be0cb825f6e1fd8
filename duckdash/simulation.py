"""duckdash/simulation.py — Headless game simulation and session state machine.

SimState is the single aggregate the core owns: session (lives, level, camera,
phase), the actor, and the buffered movement intent. ``sim_step`` advances it
by exactly one tick through a fixed pipeline:

    actor update → hazard check → consequences → camera

No Pyxel imports; the host and the headless drivers share this module.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from duckdash.actor import ActorSnapshot, actor_update, create_actor, respawn_actor, snapshot
from duckdash.camera import camera_offset_for
from duckdash.collision import find_hazard
from duckdash.constants import INITIAL_LIVES, PROGRESS_MARGIN
from duckdash.level import LEVELS, Level, Obstacle
from duckdash.physics import Actor, MovementIntent, press_charge, release_charge

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Phase
# ---------------------------------------------------------------------------

class GamePhase(Enum):
    START = "start"
    PLAYING = "playing"
    DEAD = "dead"
    WIN = "win"


# ---------------------------------------------------------------------------
# Event types
# ---------------------------------------------------------------------------

@dataclass
class LandedEvent:
    pass


@dataclass
class HazardEvent:
    obstacle: Obstacle


@dataclass
class RespawnEvent:
    pass


@dataclass
class GameOverEvent:
    pass


@dataclass
class LevelAdvancedEvent:
    level_index: int


@dataclass
class WinEvent:
    pass


Event = (
    LandedEvent
    | HazardEvent
    | RespawnEvent
    | GameOverEvent
    | LevelAdvancedEvent
    | WinEvent
)


# ---------------------------------------------------------------------------
# State
# ---------------------------------------------------------------------------

@dataclass
class SessionState:
    lives: int = INITIAL_LIVES
    level_index: int = 0
    camera_offset: float = 0.0
    phase: GamePhase = GamePhase.START


@dataclass
class SimState:
    """Complete headless game state."""

    levels: tuple[Level, ...]
    session: SessionState = field(default_factory=SessionState)
    actor: Actor = field(default_factory=create_actor)
    intent: MovementIntent = field(default_factory=MovementIntent)
    frame: int = 0
    lives_lost: int = 0
    levels_cleared: int = 0
    max_x_reached: float = 0.0


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------

def create_sim(levels: tuple[Level, ...] | list[Level] = LEVELS) -> SimState:
    """Build a session in the START phase over a level catalog.

    Raises:
        ValueError: If the catalog is empty.
    """
    levels = tuple(levels)
    if not levels:
        raise ValueError("Level catalog must contain at least one level")
    sim = SimState(levels=levels)
    sim.max_x_reached = sim.actor.x
    return sim


def start_or_reset(sim: SimState) -> None:
    """Re-initialize the whole session and start playing."""
    sim.session = SessionState(phase=GamePhase.PLAYING)
    respawn_actor(sim.actor)
    sim.intent = MovementIntent()
    sim.frame = 0
    sim.lives_lost = 0
    sim.levels_cleared = 0
    sim.max_x_reached = sim.actor.x
    logger.info("session started with %d lives", sim.session.lives)


# ---------------------------------------------------------------------------
# Inbound intents
# ---------------------------------------------------------------------------

def set_movement_intent(sim: SimState, left: bool, right: bool) -> None:
    sim.intent = MovementIntent(left=left, right=right)


def press_jump(sim: SimState) -> bool:
    """Jump-charge press edge. Ignored outside PLAYING."""
    if sim.session.phase != GamePhase.PLAYING:
        return False
    return press_charge(sim.actor)


def release_jump(sim: SimState) -> bool:
    """Jump-charge release edge. No-op without an active charge."""
    return release_charge(sim.actor)


# ---------------------------------------------------------------------------
# Outbound queries
# ---------------------------------------------------------------------------

def current_level(sim: SimState) -> Level:
    """Level the session is on. An out-of-range index raises IndexError."""
    index = sim.session.level_index
    if not 0 <= index < len(sim.levels):
        raise IndexError(f"Level index {index} out of range (0..{len(sim.levels) - 1})")
    return sim.levels[index]


def actor_snapshot(sim: SimState) -> ActorSnapshot:
    return snapshot(sim.actor)


# ---------------------------------------------------------------------------
# Consequences
# ---------------------------------------------------------------------------

def _respawn(sim: SimState) -> None:
    respawn_actor(sim.actor)
    sim.session.camera_offset = 0.0


def _apply_hazard(sim: SimState, obstacle: Obstacle, events: list[Event]) -> None:
    session = sim.session
    session.lives = max(0, session.lives - 1)
    sim.lives_lost += 1
    events.append(HazardEvent(obstacle=obstacle))
    logger.debug(
        "hazard %r at x=%.1f, %d lives left", obstacle, sim.actor.x, session.lives,
    )

    if session.lives == 0:
        session.phase = GamePhase.DEAD
        events.append(GameOverEvent())
        logger.info("game over on level %d", session.level_index)
        return

    _respawn(sim)
    events.append(RespawnEvent())


def _check_progress(sim: SimState, level: Level, events: list[Event]) -> None:
    session = sim.session
    if sim.actor.x <= level.ground_width - PROGRESS_MARGIN:
        return

    sim.levels_cleared += 1
    if session.level_index == len(sim.levels) - 1:
        session.phase = GamePhase.WIN
        events.append(WinEvent())
        logger.info("won after %d frames", sim.frame + 1)
        return

    session.level_index += 1
    _respawn(sim)
    sim.max_x_reached = sim.actor.x
    events.append(LevelAdvancedEvent(level_index=session.level_index))
    logger.debug("advanced to level %d", session.level_index)


# ---------------------------------------------------------------------------
# Step
# ---------------------------------------------------------------------------

def sim_step(sim: SimState) -> list[Event]:
    """Advance the simulation by one tick.

    Returns the events that occurred. Outside PLAYING nothing changes and the
    list is empty.
    """
    events: list[Event] = []

    if sim.session.phase != GamePhase.PLAYING:
        return events

    level = current_level(sim)

    if actor_update(sim.actor, sim.intent, level):
        events.append(LandedEvent())

    sim.max_x_reached = max(sim.max_x_reached, sim.actor.x)

    # Progress is only checked when no hazard fired; a respawn has already
    # moved the actor back to the origin.
    obstacle = find_hazard(sim.actor, level)
    if obstacle is not None:
        _apply_hazard(sim, obstacle, events)
    else:
        _check_progress(sim, level, events)

    if sim.session.phase == GamePhase.PLAYING:
        sim.session.camera_offset = camera_offset_for(sim.actor.x)

    sim.frame += 1
    return events
