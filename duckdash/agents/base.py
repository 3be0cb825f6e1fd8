"""duckdash/agents/base.py — Agent protocol.

An agent reads the observation vector from ``extract_observation`` and
returns one of the discrete actions in ``actions.py``. Structural typing:
any class with ``act`` and ``reset`` qualifies.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class Agent(Protocol):
    def act(self, obs: np.ndarray) -> int:
        """Action index for this tick."""
        ...

    def reset(self) -> None:
        """Forget per-episode state before a new run."""
        ...
