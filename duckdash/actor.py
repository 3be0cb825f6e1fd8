"""duckdash/actor.py — Actor factory, per-tick update order, render helpers.

Orchestrates physics.py steps in the fixed order the jump arc depends on:
intent → charge → horizontal → vertical/landing → gravity.
"""

from __future__ import annotations

from dataclasses import dataclass

from duckdash.collision import has_ground_support
from duckdash.constants import ACTOR_HEIGHT, ACTOR_WIDTH, START_X, START_Y
from duckdash.level import Level
from duckdash.physics import (
    Actor,
    MovementIntent,
    apply_charge,
    apply_gravity,
    apply_horizontal,
    apply_movement_intent,
    apply_vertical,
)


# ---------------------------------------------------------------------------
# Snapshot
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ActorSnapshot:
    """What a renderer needs to draw the actor."""
    x: float
    y: float
    facing: int  # +1 right, -1 left


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------

def create_actor(x: float = START_X, y: float = START_Y) -> Actor:
    """Create a grounded actor at rest."""
    return Actor(x=x, y=y)


def respawn_actor(actor: Actor) -> None:
    """Reset every kinematic field to the level origin."""
    actor.x = START_X
    actor.y = START_Y
    actor.x_vel = 0.0
    actor.y_vel = 0.0
    actor.is_jumping = False
    actor.is_charging = False
    actor.jump_charge = 0.0


# ---------------------------------------------------------------------------
# Main update
# ---------------------------------------------------------------------------

def actor_update(actor: Actor, intent: MovementIntent, level: Level) -> bool:
    """Advance the actor by one tick. Returns True if it landed this tick."""
    apply_movement_intent(actor, intent)
    apply_charge(actor)
    apply_horizontal(actor, level.ground_width)
    landed = apply_vertical(actor, has_ground_support(actor.x, level))
    apply_gravity(actor)
    return landed


# ---------------------------------------------------------------------------
# Rendering helpers
# ---------------------------------------------------------------------------

def snapshot(actor: Actor) -> ActorSnapshot:
    return ActorSnapshot(
        x=actor.x,
        y=actor.y,
        facing=1 if actor.x_vel >= 0 else -1,
    )


def get_actor_rect(actor: Actor) -> tuple[float, float, float, float]:
    """Return (x, y, width, height) of the actor's bounding box."""
    return (actor.x, actor.y, ACTOR_WIDTH, ACTOR_HEIGHT)
