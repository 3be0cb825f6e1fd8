"""duckdash/env_registration.py — Gymnasium registration.

Importing this module makes ``gymnasium.make("duckdash/Duck-v0")`` available.
"""

import gymnasium as gym

ENV_ID = "duckdash/Duck-v0"
MAX_EPISODE_STEPS = 3600

gym.register(
    id=ENV_ID,
    entry_point="duckdash.env:DuckDashEnv",
    kwargs={"max_steps": MAX_EPISODE_STEPS},
    max_episode_steps=MAX_EPISODE_STEPS,
)
