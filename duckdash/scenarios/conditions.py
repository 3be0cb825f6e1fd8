"""duckdash/scenarios/conditions — Success/failure conditions and their checks.

Each condition type maps to a predicate over the live simulation and the
trajectory recorded so far. Success is checked before failure on every frame.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from duckdash.simulation import GamePhase, HazardEvent

if TYPE_CHECKING:
    from duckdash.simulation import SimState

Verdict = tuple[bool | None, str | None]
PENDING: Verdict = (None, None)

DEFAULT_STUCK_WINDOW = 120
DEFAULT_STUCK_TOLERANCE = 2.0


@dataclass
class SuccessCondition:
    type: str
    value: float | None = None
    level: int | None = None


@dataclass
class FailureCondition:
    type: str
    tolerance: float | None = None
    window: int | None = None
    conditions: list[FailureCondition] | None = None


@dataclass
class StartOverride:
    """Level and x position the actor is placed at before the first frame."""
    x: float
    level: int = 0


# ---------------------------------------------------------------------------
# Success predicates
# ---------------------------------------------------------------------------


def _won(cond: SuccessCondition, sim: SimState, frame: int, max_frames: int) -> bool:
    return sim.session.phase == GamePhase.WIN


def _level_reached(cond: SuccessCondition, sim: SimState, frame: int, max_frames: int) -> bool:
    return sim.session.level_index >= int(cond.value)


def _past_x(cond: SuccessCondition, sim: SimState, frame: int, max_frames: int) -> bool:
    if cond.level is not None and sim.session.level_index != cond.level:
        return False
    return sim.actor.x >= cond.value


def _alive_at_end(cond: SuccessCondition, sim: SimState, frame: int, max_frames: int) -> bool:
    return frame >= max_frames - 1 and sim.session.phase != GamePhase.DEAD


_SUCCESS_CHECKS: dict[str, Callable[..., bool]] = {
    "win": _won,
    "level_reached": _level_reached,
    "position_x_gte": _past_x,
    "alive_at_end": _alive_at_end,
}

VALID_SUCCESS_TYPES: frozenset[str] = frozenset(_SUCCESS_CHECKS)


# ---------------------------------------------------------------------------
# Failure predicates
# ---------------------------------------------------------------------------


def _game_over(cond: FailureCondition, sim: SimState, trajectory: list) -> str | None:
    return "game_over" if sim.session.phase == GamePhase.DEAD else None


def _life_lost(cond: FailureCondition, sim: SimState, trajectory: list) -> str | None:
    if trajectory and HazardEvent.__name__ in trajectory[-1].events:
        return "life_lost"
    return None


def _stuck(cond: FailureCondition, sim: SimState, trajectory: list) -> str | None:
    window = cond.window or DEFAULT_STUCK_WINDOW
    if len(trajectory) < window:
        return None
    xs = [r.x for r in trajectory[-window:]]
    if max(xs) - min(xs) < (cond.tolerance or DEFAULT_STUCK_TOLERANCE):
        return "stuck"
    return None


def _any(cond: FailureCondition, sim: SimState, trajectory: list) -> str | None:
    for sub in cond.conditions or []:
        reason = _FAILURE_CHECKS[sub.type](sub, sim, trajectory)
        if reason is not None:
            return reason
    return None


_FAILURE_CHECKS: dict[str, Callable[..., str | None]] = {
    "game_over": _game_over,
    "life_lost": _life_lost,
    "stuck": _stuck,
    "any": _any,
}

VALID_FAILURE_TYPES: frozenset[str] = frozenset(_FAILURE_CHECKS)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def check_conditions(
    success: SuccessCondition,
    failure: FailureCondition,
    sim: SimState,
    trajectory: list,
    frame: int,
    max_frames: int,
) -> Verdict:
    """Evaluate both conditions after a frame.

    Returns ``(True, reason)`` on success, ``(False, reason)`` on failure and
    ``(None, None)`` while the scenario is still running.
    """
    if _SUCCESS_CHECKS[success.type](success, sim, frame, max_frames):
        return True, success.type
    reason = _FAILURE_CHECKS[failure.type](failure, sim, trajectory)
    if reason is not None:
        return False, reason
    return PENDING
