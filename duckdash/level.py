"""duckdash/level.py — Obstacle variants and the built-in level catalog.

Levels are immutable: an ordered tuple of obstacles plus the traversable
ground width. The catalog is compiled in; ``level_from_dict`` builds the same
structures from plain data so scenario files can describe custom geometry.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


# ---------------------------------------------------------------------------
# Obstacles
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Block:
    """Solid obstacle standing on the ground. Height is measured upward."""
    x: float
    width: float
    height: float


@dataclass(frozen=True)
class Gap:
    """Missing stretch of ground."""
    x: float
    width: float


@dataclass(frozen=True)
class Finish:
    """Level-end marker. Never collides."""
    x: float
    width: float
    height: float


Obstacle = Union[Block, Gap, Finish]

HAZARD_TYPES = (Block, Gap)


# ---------------------------------------------------------------------------
# Level
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Level:
    obstacles: tuple[Obstacle, ...]
    ground_width: float

    @property
    def gaps(self) -> tuple[Gap, ...]:
        return tuple(o for o in self.obstacles if isinstance(o, Gap))

    @property
    def hazards(self) -> tuple[Obstacle, ...]:
        return tuple(o for o in self.obstacles if isinstance(o, HAZARD_TYPES))


LEVELS: tuple[Level, ...] = (
    Level(
        obstacles=(
            Block(x=200, width=40, height=40),
            Block(x=400, width=40, height=60),
            Block(x=600, width=40, height=50),
        ),
        ground_width=1200,
    ),
    Level(
        obstacles=(
            Block(x=200, width=40, height=40),
            Block(x=500, width=40, height=60),
            Block(x=700, width=40, height=80),
        ),
        ground_width=1500,
    ),
    Level(
        obstacles=(
            Block(x=300, width=40, height=60),
            Gap(x=600, width=100),
            Block(x=800, width=40, height=70),
            Finish(x=1800, width=40, height=120),
        ),
        ground_width=1840,
    ),
)


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------

def next_hazard(level: Level, x: float) -> Obstacle | None:
    """Return the nearest hazard whose right edge is still ahead of ``x``."""
    ahead = [o for o in level.hazards if o.x + o.width > x]
    if not ahead:
        return None
    return min(ahead, key=lambda o: o.x)


# ---------------------------------------------------------------------------
# Building from plain data
# ---------------------------------------------------------------------------

def _obstacle_from_dict(data: dict) -> Obstacle:
    kind = data.get("type")
    if kind == "block":
        return Block(
            x=float(data["x"]),
            width=float(data["width"]),
            height=float(data["height"]),
        )
    if kind == "gap":
        return Gap(x=float(data["x"]), width=float(data["width"]))
    if kind == "finish":
        return Finish(
            x=float(data["x"]),
            width=float(data["width"]),
            height=float(data.get("height", 0.0)),
        )
    raise ValueError(f"Unknown obstacle type: {kind!r}")


def level_from_dict(data: dict) -> Level:
    """Build a Level from ``{"ground_width": ..., "obstacles": [...]}``.

    Raises:
        ValueError: If an obstacle type is not recognized or the ground
            width is not positive.
    """
    ground_width = float(data["ground_width"])
    if ground_width <= 0:
        raise ValueError(f"ground_width must be positive, got {ground_width}")
    obstacles = tuple(_obstacle_from_dict(o) for o in data.get("obstacles", []))
    return Level(obstacles=obstacles, ground_width=ground_width)


def levels_from_list(data: list[dict]) -> tuple[Level, ...]:
    return tuple(level_from_dict(d) for d in data)
