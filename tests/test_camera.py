"""Tests for duckdash/camera.py — dead-zone camera."""

from __future__ import annotations

from duckdash.agents.actions import ACTION_LEFT
from duckdash.camera import camera_offset_for
from duckdash.constants import CAMERA_DEAD_ZONE
from duckdash.level import Level
from tests.harness import hold_right, playing_sim, run_actions

OPEN_FIELD = (Level(obstacles=(), ground_width=2000),)


def test_zero_inside_dead_zone():
    assert camera_offset_for(0.0) == 0.0
    assert camera_offset_for(CAMERA_DEAD_ZONE) == 0.0


def test_tracks_past_dead_zone():
    assert camera_offset_for(450.0) == 150.0


def test_custom_dead_zone():
    assert camera_offset_for(450.0, dead_zone=100.0) == 350.0


def test_camera_follows_actor_in_sim():
    sim = playing_sim(OPEN_FIELD)
    hold_right(sim, 70)
    assert sim.actor.x == 400.0
    assert sim.session.camera_offset == 100.0


def test_camera_never_negative_walking_left():
    sim = playing_sim(OPEN_FIELD)
    result = run_actions(sim, [ACTION_LEFT] * 30)
    assert all(s.x >= 0 for s in result.snapshots)
    assert sim.session.camera_offset == 0.0
