"""duckdash/env.py — Gymnasium environment over the headless simulation.

One env step is one simulation tick driven by a discrete action. Episodes end
(terminated) on game over or win, and are cut off (truncated) after
``max_steps`` ticks. Observation, reward and action mapping live in their own
modules and are shared with the scenario runner.
"""

from __future__ import annotations

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from duckdash.agents.actions import NUM_ACTIONS, apply_action
from duckdash.constants import FPS
from duckdash.level import LEVELS, Level
from duckdash.observation import OBS_DIM, extract_observation
from duckdash.reward import compute_reward, total_progress
from duckdash.simulation import GamePhase, SimState, create_sim, sim_step, start_or_reset

TERMINAL_PHASES = (GamePhase.DEAD, GamePhase.WIN)


class DuckDashEnv(gym.Env):
    """Duck platformer as a discrete-action Gymnasium env."""

    metadata = {"render_modes": ["ansi"], "render_fps": FPS}

    def __init__(
        self,
        levels: tuple[Level, ...] = LEVELS,
        render_mode: str | None = None,
        max_steps: int = 3600,
    ) -> None:
        super().__init__()
        self.levels = tuple(levels)
        self.render_mode = render_mode
        self.max_steps = max_steps

        self.action_space = spaces.Discrete(NUM_ACTIONS)
        self.observation_space = spaces.Box(
            low=-np.inf, high=np.inf, shape=(OBS_DIM,), dtype=np.float32,
        )

        self.sim: SimState | None = None
        self._steps = 0
        self._jump_held = False

    def reset(
        self,
        *,
        seed: int | None = None,
        options: dict | None = None,
    ) -> tuple[np.ndarray, dict]:
        super().reset(seed=seed)
        self.sim = create_sim(self.levels)
        start_or_reset(self.sim)
        self._steps = 0
        self._jump_held = False
        return extract_observation(self.sim), self._info()

    def step(self, action: int) -> tuple[np.ndarray, float, bool, bool, dict]:
        sim = self.sim
        before = total_progress(sim)
        self._jump_held = apply_action(sim, int(action), self._jump_held)
        events = sim_step(sim)
        self._steps += 1

        reward = compute_reward(sim, events, before, self._steps, self.max_steps)
        terminated = sim.session.phase in TERMINAL_PHASES
        truncated = self._steps >= self.max_steps
        return extract_observation(sim), reward, terminated, truncated, self._info()

    def render(self) -> str | None:
        if self.render_mode != "ansi" or self.sim is None:
            return None
        s = self.sim
        return (
            f"frame={s.frame} level={s.session.level_index} lives={s.session.lives} "
            f"x={s.actor.x:.1f} y={s.actor.y:.1f} phase={s.session.phase.value}"
        )

    def _info(self) -> dict:
        s = self.sim
        return {
            "frame": s.frame,
            "x": s.actor.x,
            "y": s.actor.y,
            "level": s.session.level_index,
            "lives": s.session.lives,
            "phase": s.session.phase.value,
            "progress": total_progress(s),
        }
