"""duckdash/invariants.py — Invariant checker for recorded trajectories.

Scans per-frame snapshots (and the events emitted on each frame) for states
the game rules never produce: lives out of range, the actor outside the level
or below solid ground, charging in mid-air, lives lost without a hazard,
terminal phases that keep changing. Library module for tests and tooling.
No Pyxel imports.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, Protocol, Sequence, runtime_checkable

from duckdash.collision import has_ground_support
from duckdash.constants import ACTOR_WIDTH, INITIAL_LIVES, REST_Y
from duckdash.level import Level
from duckdash.simulation import HazardEvent

if TYPE_CHECKING:
    from duckdash.simulation import Event

TERMINAL_PHASES = ("dead", "win")


@runtime_checkable
class SnapshotLike(Protocol):
    """Fields the checker reads from a frame snapshot."""

    frame: int
    x: float
    y: float
    is_jumping: bool
    is_charging: bool
    lives: int
    level_index: int
    phase: str


@dataclass
class Violation:
    frame: int
    invariant: str
    details: str
    severity: str  # "error" or "warning"


def _error(snap: SnapshotLike, invariant: str, details: str) -> Violation:
    return Violation(snap.frame, invariant, details, "error")


# ---------------------------------------------------------------------------
# Per-frame checks
# ---------------------------------------------------------------------------


def _frame_violations(levels: Sequence[Level], snap: SnapshotLike) -> Iterator[Violation]:
    if not 0 <= snap.lives <= INITIAL_LIVES:
        yield _error(snap, "lives_out_of_range", f"lives={snap.lives} outside 0..{INITIAL_LIVES}")
    if snap.lives == 0 and snap.phase != "dead":
        yield _error(snap, "no_lives_but_not_dead", f"lives=0 in phase {snap.phase!r}")
    if snap.phase == "dead" and snap.lives != 0:
        yield _error(snap, "dead_with_lives_left", f"phase 'dead' with lives={snap.lives}")
    if snap.is_jumping and snap.is_charging:
        yield _error(snap, "charging_while_airborne", f"charging in mid-air at x={snap.x:.1f}")

    if not 0 <= snap.level_index < len(levels):
        yield _error(
            snap, "level_index_out_of_range",
            f"level_index={snap.level_index} with {len(levels)} levels",
        )
        return
    level = levels[snap.level_index]

    max_x = level.ground_width - ACTOR_WIDTH
    if not 0 <= snap.x <= max_x:
        yield _error(snap, "position_x_out_of_bounds", f"x={snap.x:.1f} outside [0, {max_x:.1f}]")

    # Only a gap lets the actor sink below its resting height.
    if snap.y > REST_Y and has_ground_support(snap.x, level):
        yield _error(snap, "below_ground", f"y={snap.y:.1f} over solid ground at x={snap.x:.1f}")


# ---------------------------------------------------------------------------
# Frame-to-frame checks
# ---------------------------------------------------------------------------


def _transition_violations(
    prev: SnapshotLike, curr: SnapshotLike, events: Sequence[Event],
) -> Iterator[Violation]:
    if curr.lives < prev.lives and not any(isinstance(e, HazardEvent) for e in events):
        yield _error(
            curr, "life_lost_without_hazard",
            f"lives {prev.lives} → {curr.lives} with no hazard event",
        )

    if prev.phase in TERMINAL_PHASES and curr.phase == prev.phase:
        before = (prev.x, prev.y, prev.lives, prev.level_index)
        after = (curr.x, curr.y, curr.lives, curr.level_index)
        if before != after:
            yield _error(curr, "terminal_state_changed", f"state changed in phase {curr.phase!r}")


def check_invariants(
    levels: Sequence[Level],
    snapshots: Sequence[SnapshotLike],
    events_per_frame: Sequence[Sequence[Event]],
) -> list[Violation]:
    """Scan a trajectory and return its violations sorted by frame.

    Args:
        levels: The level catalog the trajectory was recorded on.
        snapshots: One snapshot per frame.
        events_per_frame: Events per frame, parallel to *snapshots*.
    """
    violations: list[Violation] = []
    for i, snap in enumerate(snapshots):
        violations.extend(_frame_violations(levels, snap))
        if i > 0:
            events = events_per_frame[i] if i < len(events_per_frame) else ()
            violations.extend(_transition_violations(snapshots[i - 1], snap, events))
    violations.sort(key=lambda v: v.frame)
    return violations
