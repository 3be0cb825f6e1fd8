"""Tests for duckdash/game.py — GameCore host facade."""

from __future__ import annotations

from duckdash.actor import ActorSnapshot
from duckdash.constants import INITIAL_LIVES, REST_Y, START_X
from duckdash.game import GameCore
from duckdash.level import LEVELS, Level
from duckdash.simulation import GamePhase, HazardEvent, WinEvent


def _tick_right(game: GameCore, ticks: int) -> list:
    events = []
    for _ in range(ticks):
        game.set_movement_intent(left=False, right=True)
        events.extend(game.tick())
    return events


def test_starts_in_start_phase():
    game = GameCore()
    assert game.phase == GamePhase.START
    assert game.lives == INITIAL_LIVES
    assert game.level_index == 0
    assert game.camera_offset == 0.0
    assert game.current_level() == LEVELS[0]


def test_tick_before_start_does_nothing():
    game = GameCore()
    assert _tick_right(game, 10) == []
    assert game.actor_snapshot() == ActorSnapshot(x=START_X, y=REST_Y, facing=1)


def test_press_jump_before_start():
    game = GameCore()
    assert game.press_jump() is False


def test_play_into_first_block():
    game = GameCore()
    game.start_or_reset()
    events = _tick_right(game, 23)
    assert any(isinstance(e, HazardEvent) for e in events)
    assert game.lives == INITIAL_LIVES - 1
    assert game.actor_snapshot().x == START_X


def test_game_over_then_reset():
    game = GameCore()
    game.start_or_reset()
    _tick_right(game, 69)
    assert game.phase == GamePhase.DEAD
    assert game.lives == 0
    game.start_or_reset()
    assert game.phase == GamePhase.PLAYING
    assert game.lives == INITIAL_LIVES


def test_jump_edges():
    game = GameCore()
    game.start_or_reset()
    assert game.press_jump() is True
    game.tick()
    assert game.release_jump() is True
    game.tick()
    assert game.actor_snapshot().y < REST_Y
    assert game.release_jump() is False


def test_custom_catalog_win():
    game = GameCore(levels=(Level(obstacles=(), ground_width=300),))
    game.start_or_reset()
    events = _tick_right(game, 31)
    assert any(isinstance(e, WinEvent) for e in events)
    assert game.phase == GamePhase.WIN
