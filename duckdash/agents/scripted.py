"""duckdash/agents/scripted.py — ScriptedAgent: fixed per-tick action windows.

The timeline is a list of ``(start, end, action)`` windows, end exclusive.
Ticks not covered by any window fall back to NOOP; the first matching window
wins where windows overlap.
"""

from __future__ import annotations

import numpy as np

from duckdash.agents.actions import ACTION_MAP, ACTION_NOOP


class ScriptedAgent:
    """Replays a timeline, ignoring observations."""

    def __init__(self, timeline: list[tuple[int, int, int]]) -> None:
        self.timeline: list[tuple[int, int, int]] = []
        for start, end, action in timeline:
            if action not in ACTION_MAP:
                raise ValueError(f"Unknown action {action!r} in timeline")
            self.timeline.append((int(start), int(end), int(action)))
        self._tick = 0

    def action_at(self, tick: int) -> int:
        return next(
            (action for start, end, action in self.timeline if start <= tick < end),
            ACTION_NOOP,
        )

    def act(self, obs: np.ndarray) -> int:
        action = self.action_at(self._tick)
        self._tick += 1
        return action

    def reset(self) -> None:
        self._tick = 0
