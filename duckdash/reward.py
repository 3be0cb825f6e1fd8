"""duckdash/reward.py — Progress measure and per-tick reward.

Shared by the Gymnasium env and the scenario runner so both score a run the
same way.
"""

from __future__ import annotations

from duckdash.constants import MOVE_SPEED
from duckdash.simulation import GamePhase, HazardEvent, SimState


def total_progress(sim: SimState) -> float:
    """Distance covered across the whole catalog, normalized to [0, 1]."""
    total = sum(level.ground_width for level in sim.levels)
    done = sum(
        level.ground_width for level in sim.levels[: sim.session.level_index]
    )
    if sim.session.phase == GamePhase.WIN:
        return 1.0
    return min(1.0, (done + sim.actor.x) / total)


def compute_reward(
    sim: SimState,
    events: list,
    prev_progress: float,
    step_count: int,
    max_steps: int,
) -> float:
    """Compute the reward for one tick."""
    reward = 0.0

    # Progress delta (negative after a respawn)
    reward += (total_progress(sim) - prev_progress) * 10.0

    # Speed bonus
    reward += max(0.0, sim.actor.x_vel) / MOVE_SPEED * 0.01

    # Win bonus
    if sim.session.phase == GamePhase.WIN:
        time_bonus = max(0.0, 1.0 - step_count / max_steps)
        reward += 10.0 + 5.0 * time_bonus

    # Life lost / game over
    for e in events:
        if isinstance(e, HazardEvent):
            reward -= 1.0
    if sim.session.phase == GamePhase.DEAD:
        reward -= 5.0

    # Time penalty
    reward -= 0.001

    return reward
