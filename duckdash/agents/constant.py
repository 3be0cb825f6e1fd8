"""duckdash/agents/constant.py — Agents that repeat one action forever.

Baselines for scenarios: IdleAgent never moves, HoldRightAgent walks straight
into the first hazard.
"""

from __future__ import annotations

import numpy as np

from duckdash.agents.actions import ACTION_NOOP, ACTION_RIGHT


class ConstantAgent:
    action: int = ACTION_NOOP

    def act(self, obs: np.ndarray) -> int:
        return self.action

    def reset(self) -> None:
        pass


class IdleAgent(ConstantAgent):
    action = ACTION_NOOP


class HoldRightAgent(ConstantAgent):
    action = ACTION_RIGHT
