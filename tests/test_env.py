"""Tests for duckdash/env.py — DuckDashEnv Gymnasium environment."""

from __future__ import annotations

import inspect
from pathlib import Path

import gymnasium as gym
import numpy as np

from duckdash.agents.actions import ACTION_NOOP, ACTION_RIGHT, NUM_ACTIONS
from duckdash.env import DuckDashEnv
from duckdash.level import Level
from duckdash.observation import OBS_DIM


# ---------------------------------------------------------------------------
# Space definitions
# ---------------------------------------------------------------------------

def test_observation_space_shape():
    env = DuckDashEnv()
    assert env.observation_space.shape == (OBS_DIM,)
    assert env.observation_space.dtype == np.float32


def test_action_space():
    env = DuckDashEnv()
    assert env.action_space.n == NUM_ACTIONS


# ---------------------------------------------------------------------------
# Reset
# ---------------------------------------------------------------------------

def test_reset_returns_obs_info():
    env = DuckDashEnv()
    obs, info = env.reset()
    assert isinstance(obs, np.ndarray)
    assert obs.shape == (OBS_DIM,)
    assert isinstance(info, dict)


def test_reset_initializes_sim():
    env = DuckDashEnv()
    assert env.sim is None
    env.reset()
    assert env.sim is not None
    assert env.sim.session.phase.value == "playing"


def test_reset_info_keys():
    env = DuckDashEnv()
    _, info = env.reset()
    assert set(info) == {"frame", "x", "y", "level", "lives", "phase", "progress"}


def test_reset_discards_previous_episode():
    env = DuckDashEnv()
    env.reset()
    for _ in range(23):
        env.step(ACTION_RIGHT)
    _, info = env.reset()
    assert info["lives"] == 3
    assert info["frame"] == 0


# ---------------------------------------------------------------------------
# Step
# ---------------------------------------------------------------------------

def test_step_returns_five_tuple():
    env = DuckDashEnv()
    env.reset()
    obs, reward, terminated, truncated, info = env.step(ACTION_RIGHT)
    assert obs.shape == (OBS_DIM,)
    assert isinstance(reward, float)
    assert terminated is False
    assert truncated is False
    assert info["x"] == 55.0


def test_life_loss_does_not_terminate():
    env = DuckDashEnv()
    env.reset()
    for _ in range(23):
        _, _, terminated, _, info = env.step(ACTION_RIGHT)
    assert info["lives"] == 2
    assert terminated is False


def test_game_over_terminates():
    env = DuckDashEnv()
    env.reset()
    terminated = False
    steps = 0
    while not terminated:
        _, _, terminated, _, info = env.step(ACTION_RIGHT)
        steps += 1
    assert steps == 69
    assert info["phase"] == "dead"


def test_win_terminates():
    env = DuckDashEnv(levels=(Level(obstacles=(), ground_width=300),))
    env.reset()
    for _ in range(31):
        _, reward, terminated, _, info = env.step(ACTION_RIGHT)
    assert terminated is True
    assert info["phase"] == "win"
    assert reward > 10.0


def test_truncation():
    env = DuckDashEnv(max_steps=10)
    env.reset()
    for _ in range(10):
        _, _, terminated, truncated, _ = env.step(ACTION_NOOP)
    assert truncated is True
    assert terminated is False


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------

def test_registered_env():
    import duckdash.env_registration  # noqa: F401

    env = gym.make("duckdash/Duck-v0")
    obs, _ = env.reset()
    assert obs.shape == (OBS_DIM,)
    env.close()


def test_env_no_pyxel():
    import duckdash.env as mod

    source = Path(inspect.getfile(mod)).read_text()
    assert "import pyxel" not in source


def test_ansi_render():
    env = DuckDashEnv(render_mode="ansi")
    env.reset()
    env.step(ACTION_RIGHT)
    text = env.render()
    assert "x=55.0" in text
    assert "phase=playing" in text


def test_no_render_mode():
    env = DuckDashEnv()
    env.reset()
    assert env.render() is None
