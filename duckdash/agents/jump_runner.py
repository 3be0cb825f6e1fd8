"""duckdash/agents/jump_runner.py — JumpRunnerAgent: run right, hop hazards.

Runs right and taps jump from a standstill once the next hazard is within the
trigger distance. When a landing leaves it too close to the next hazard to
clear it, it backs off first. Reads only the observation vector.
"""

from __future__ import annotations

import numpy as np

from duckdash.agents.actions import ACTION_JUMP, ACTION_LEFT, ACTION_RIGHT
from duckdash.constants import MOVE_SPEED
from duckdash.observation import HAZARD_RANGE

# Distances are from the actor's front edge to the hazard's left edge.
_TOLERANCE = MOVE_SPEED / 2


class JumpRunnerAgent:
    """Agent that runs right and jumps over blocks and gaps."""

    def __init__(self, trigger: float = 30.0, min_clearance: float = 20.0) -> None:
        self.trigger = trigger
        self.min_clearance = min_clearance

    def act(self, obs: np.ndarray) -> int:
        airborne = obs[4] > 0.5
        charging = obs[5] > 0.5

        # Releasing the button launches the jump
        if charging or airborne:
            return ACTION_RIGHT

        if obs[10] == 0.0:
            return ACTION_RIGHT

        distance = float(obs[9]) * HAZARD_RANGE
        if distance > self.trigger + _TOLERANCE:
            return ACTION_RIGHT
        if distance >= self.min_clearance - _TOLERANCE:
            return ACTION_JUMP
        return ACTION_LEFT

    def reset(self) -> None:
        pass
