"""duckdash/observation.py — Observation extraction from SimState.

Produces a flat float32 vector for agent consumption.
"""

from __future__ import annotations

import numpy as np

from duckdash.constants import (
    ACTOR_HEIGHT,
    ACTOR_WIDTH,
    INITIAL_LIVES,
    MAX_CHARGE,
    MAX_JUMP_FORCE,
    MOVE_SPEED,
    PROGRESS_MARGIN,
    REST_Y,
)
from duckdash.level import Gap, next_hazard
from duckdash.reward import total_progress
from duckdash.simulation import SimState, current_level

OBS_DIM = 13

HAZARD_RANGE = 400.0
"""Look-ahead distance used to normalize the next-hazard distance."""


def extract_observation(sim: SimState) -> np.ndarray:
    """Extract an observation vector from the current simulation state.

    Layout:
        [0]  x position (normalized by ground_width)
        [1]  height above the ground (normalized by REST_Y)
        [2]  x velocity (normalized by MOVE_SPEED)
        [3]  y velocity (normalized by |MAX_JUMP_FORCE|)
        [4]  airborne flag (0.0 or 1.0)
        [5]  charging flag (0.0 or 1.0)
        [6]  jump charge (normalized by MAX_CHARGE)
        [7]  lives (normalized by INITIAL_LIVES)
        [8]  level index (normalized by the last index)
        [9]  gap between actor front and next hazard (/ HAZARD_RANGE, clipped)
        [10] next hazard kind: block height / ACTOR_HEIGHT, -1.0 for a gap,
             0.0 when nothing lies ahead
        [11] distance to the level-progress threshold (/ ground_width)
        [12] overall progress across the catalog
    """
    a = sim.actor
    level = current_level(sim)
    obs = np.zeros(OBS_DIM, dtype=np.float32)

    # Actor kinematics (7)
    obs[0] = a.x / level.ground_width
    obs[1] = (REST_Y - a.y) / REST_Y
    obs[2] = a.x_vel / MOVE_SPEED
    obs[3] = a.y_vel / abs(MAX_JUMP_FORCE)
    obs[4] = float(a.is_jumping)
    obs[5] = float(a.is_charging)
    obs[6] = a.jump_charge / MAX_CHARGE

    # Session (2)
    obs[7] = sim.session.lives / INITIAL_LIVES
    obs[8] = sim.session.level_index / max(1, len(sim.levels) - 1)

    # Look-ahead (2)
    hazard = next_hazard(level, a.x)
    if hazard is None:
        obs[9] = 1.0
        obs[10] = 0.0
    else:
        gap = hazard.x - (a.x + ACTOR_WIDTH)
        obs[9] = min(gap, HAZARD_RANGE) / HAZARD_RANGE
        obs[10] = -1.0 if isinstance(hazard, Gap) else hazard.height / ACTOR_HEIGHT

    # Progress (2)
    threshold = level.ground_width - PROGRESS_MARGIN
    obs[11] = (threshold - a.x) / level.ground_width
    obs[12] = total_progress(sim)

    return obs
