"""Tests for duckdash/observation.py — observation vector layout."""

from __future__ import annotations

import numpy as np
import pytest

from duckdash.level import Gap, Level
from duckdash.observation import HAZARD_RANGE, OBS_DIM, extract_observation
from duckdash.simulation import press_jump
from tests.harness import hold_right, playing_sim


def test_shape_and_dtype():
    obs = extract_observation(playing_sim())
    assert obs.shape == (OBS_DIM,)
    assert obs.dtype == np.float32


def test_initial_values():
    obs = extract_observation(playing_sim())
    assert obs[0] == pytest.approx(50 / 1200)
    assert obs[1] == pytest.approx(0.0)
    assert obs[2] == pytest.approx(0.0)
    assert obs[4] == 0.0
    assert obs[5] == 0.0
    assert obs[7] == pytest.approx(1.0)
    assert obs[8] == pytest.approx(0.0)
    assert obs[9] == pytest.approx(110 / HAZARD_RANGE)
    assert obs[10] == pytest.approx(1.0)
    assert obs[11] == pytest.approx(1050 / 1200)
    assert obs[12] == pytest.approx(50 / 4540)


def test_moving_right():
    sim = playing_sim()
    hold_right(sim, 4)
    obs = extract_observation(sim)
    assert obs[2] == pytest.approx(1.0)
    assert obs[9] == pytest.approx(90 / HAZARD_RANGE)


def test_charging_flag():
    sim = playing_sim()
    press_jump(sim)
    assert extract_observation(sim)[5] == 1.0


def test_lives_drop():
    sim = playing_sim()
    hold_right(sim, 23)
    assert extract_observation(sim)[7] == pytest.approx(2 / 3)


def test_gap_marker():
    sim = playing_sim((Level(obstacles=(Gap(x=200, width=100),), ground_width=1000),))
    assert extract_observation(sim)[10] == -1.0


def test_nothing_ahead():
    sim = playing_sim((Level(obstacles=(), ground_width=1000),))
    obs = extract_observation(sim)
    assert obs[9] == 1.0
    assert obs[10] == 0.0


def test_far_hazard_is_clipped():
    sim = playing_sim((Level(obstacles=(Gap(x=900, width=50),), ground_width=1000),))
    assert extract_observation(sim)[9] == pytest.approx(1.0)
