"""duckdash/collision.py — Hazard detection and ground support against a level.

All functions are pure: they read an actor position and a level and never
mutate either. Obstacles do not push the actor sideways; a block only matters
when the actor's body dips below its top surface while overlapping it.
"""

from __future__ import annotations

from duckdash.constants import ACTOR_HEIGHT, ACTOR_WIDTH, GAP_FALL_TOLERANCE, GROUND_Y
from duckdash.level import Block, Gap, Level, Obstacle
from duckdash.physics import Actor


# ---------------------------------------------------------------------------
# Overlap helpers
# ---------------------------------------------------------------------------

def overlaps_horizontally(x: float, obstacle: Obstacle) -> bool:
    """Half-open overlap of [x, x + ACTOR_WIDTH) and [o.x, o.x + o.width)."""
    return x < obstacle.x + obstacle.width and x + ACTOR_WIDTH > obstacle.x


def _hits_block(actor: Actor, block: Block) -> bool:
    if not overlaps_horizontally(actor.x, block):
        return False
    return actor.y + ACTOR_HEIGHT > GROUND_Y - block.height


def _fell_into_gap(actor: Actor, gap: Gap) -> bool:
    if not overlaps_horizontally(actor.x, gap):
        return False
    return actor.y + ACTOR_HEIGHT > GROUND_Y + GAP_FALL_TOLERANCE


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def find_hazard(actor: Actor, level: Level) -> Obstacle | None:
    """Return the first obstacle the actor is colliding with, if any."""
    for obstacle in level.obstacles:
        if isinstance(obstacle, Block) and _hits_block(actor, obstacle):
            return obstacle
        if isinstance(obstacle, Gap) and _fell_into_gap(actor, obstacle):
            return obstacle
    return None


def check_collision(actor: Actor, level: Level) -> bool:
    return find_hazard(actor, level) is not None


def has_ground_support(x: float, level: Level) -> bool:
    """False only when the actor's whole width is over a single gap."""
    for gap in level.gaps:
        if x >= gap.x and x + ACTOR_WIDTH <= gap.x + gap.width:
            return False
    return True
