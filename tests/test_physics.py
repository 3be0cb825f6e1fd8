"""Tests for duckdash/physics.py — movement intent, charge jump, integrator steps."""

from __future__ import annotations

import pytest

from duckdash.constants import (
    ACTOR_WIDTH,
    CHARGE_RATE,
    GRAVITY,
    MAX_CHARGE,
    MAX_JUMP_FORCE,
    MOVE_SPEED,
    REST_Y,
)
from duckdash.physics import (
    Actor,
    MovementIntent,
    apply_charge,
    apply_gravity,
    apply_horizontal,
    apply_movement_intent,
    apply_vertical,
    jump_airtime,
    jump_peak,
    launch_velocity,
    press_charge,
    release_charge,
    resolve_move_speed,
)


# ---------------------------------------------------------------------------
# Movement intent
# ---------------------------------------------------------------------------

class TestMoveSpeed:
    def test_right(self):
        assert resolve_move_speed(MovementIntent(right=True)) == MOVE_SPEED

    def test_left(self):
        assert resolve_move_speed(MovementIntent(left=True)) == -MOVE_SPEED

    def test_neither(self):
        assert resolve_move_speed(MovementIntent()) == 0.0

    def test_right_wins_over_left(self):
        assert resolve_move_speed(MovementIntent(left=True, right=True)) == MOVE_SPEED

    def test_apply_sets_velocity(self):
        a = Actor(x=100.0, x_vel=3.0)
        apply_movement_intent(a, MovementIntent())
        assert a.x_vel == 0.0


# ---------------------------------------------------------------------------
# Charge
# ---------------------------------------------------------------------------

class TestCharge:
    def test_press_grounded_starts_charging(self):
        a = Actor()
        assert press_charge(a) is True
        assert a.is_charging
        assert a.jump_charge == 0.0

    def test_press_twice_is_noop(self):
        a = Actor()
        press_charge(a)
        apply_charge(a)
        assert press_charge(a) is False
        assert a.jump_charge == pytest.approx(CHARGE_RATE)

    def test_press_airborne_is_noop(self):
        a = Actor(is_jumping=True, y=300.0, y_vel=-10.0)
        assert press_charge(a) is False
        assert not a.is_charging

    def test_charge_accumulates(self):
        a = Actor()
        press_charge(a)
        apply_charge(a)
        apply_charge(a)
        assert a.jump_charge == pytest.approx(2 * CHARGE_RATE)

    def test_charge_caps(self):
        a = Actor()
        press_charge(a)
        for _ in range(100):
            apply_charge(a)
        assert a.jump_charge == MAX_CHARGE

    def test_no_charge_without_press(self):
        a = Actor()
        apply_charge(a)
        assert a.jump_charge == 0.0

    def test_release_without_charge_is_noop(self):
        a = Actor()
        assert release_charge(a) is False
        assert not a.is_jumping
        assert a.y_vel == 0.0

    def test_release_launches(self):
        a = Actor()
        press_charge(a)
        apply_charge(a)
        assert release_charge(a) is True
        assert a.is_jumping
        assert not a.is_charging
        assert a.jump_charge == 0.0
        assert a.y_vel == launch_velocity(CHARGE_RATE)


class TestLaunchVelocity:
    def test_always_upward(self):
        for charge in (0.0, 1.5, 5.0, MAX_CHARGE):
            assert launch_velocity(charge) < 0

    def test_bounded_by_max_force(self):
        for charge in (0.0, 1.5, 5.0, MAX_CHARGE):
            assert launch_velocity(charge) <= MAX_JUMP_FORCE

    def test_tap_and_full_charge_match(self):
        assert launch_velocity(0.0) == launch_velocity(MAX_CHARGE) == MAX_JUMP_FORCE


# ---------------------------------------------------------------------------
# Horizontal
# ---------------------------------------------------------------------------

class TestHorizontal:
    def test_moves_by_velocity(self):
        a = Actor(x=100.0, x_vel=MOVE_SPEED)
        apply_horizontal(a, 1000.0)
        assert a.x == 105.0

    def test_clamps_left(self):
        a = Actor(x=2.0, x_vel=-MOVE_SPEED)
        apply_horizontal(a, 1000.0)
        assert a.x == 0.0

    def test_clamps_right(self):
        a = Actor(x=958.0, x_vel=MOVE_SPEED)
        apply_horizontal(a, 1000.0)
        assert a.x == 1000.0 - ACTOR_WIDTH


# ---------------------------------------------------------------------------
# Vertical and gravity
# ---------------------------------------------------------------------------

class TestVertical:
    def test_grounded_supported_stays_put(self):
        a = Actor(x=100.0)
        assert apply_vertical(a, supported=True) is False
        assert a.y == REST_Y
        assert not a.is_jumping

    def test_grounded_unsupported_starts_fall(self):
        a = Actor(x=100.0)
        apply_vertical(a, supported=False)
        assert a.is_jumping
        apply_gravity(a)
        assert a.y_vel == pytest.approx(GRAVITY)

    def test_falling_off_ground_drops_charge(self):
        a = Actor(x=100.0, is_charging=True, jump_charge=3.0)
        apply_vertical(a, supported=False)
        assert a.is_jumping
        assert not a.is_charging
        assert a.jump_charge == 0.0

    def test_airborne_moves_by_velocity(self):
        a = Actor(y=300.0, y_vel=-10.0, is_jumping=True)
        assert apply_vertical(a, supported=True) is False
        assert a.y == 290.0

    def test_landing_clamps_and_stops(self):
        a = Actor(y=435.0, y_vel=12.0, is_jumping=True)
        assert apply_vertical(a, supported=True) is True
        assert a.y == REST_Y
        assert a.y_vel == 0.0
        assert not a.is_jumping

    def test_no_landing_over_gap(self):
        a = Actor(y=435.0, y_vel=12.0, is_jumping=True)
        assert apply_vertical(a, supported=False) is False
        assert a.y == 447.0
        assert a.is_jumping

    def test_gravity_only_when_airborne(self):
        a = Actor()
        apply_gravity(a)
        assert a.y_vel == 0.0
        a.is_jumping = True
        apply_gravity(a)
        assert a.y_vel == pytest.approx(GRAVITY)


# ---------------------------------------------------------------------------
# Jump arc
# ---------------------------------------------------------------------------

class TestJumpArc:
    def test_airtime(self):
        assert jump_airtime(MAX_JUMP_FORCE) == 64

    def test_peak(self):
        assert jump_peak(MAX_JUMP_FORCE) == pytest.approx(403.2)

    def test_full_arc_matches_airtime(self):
        a = Actor(x=100.0)
        press_charge(a)
        release_charge(a)
        ticks = 0
        landed = False
        while not landed:
            a.x_vel = MOVE_SPEED
            apply_horizontal(a, 10000.0)
            landed = apply_vertical(a, supported=True)
            apply_gravity(a)
            ticks += 1
            assert a.y <= REST_Y
        assert ticks == jump_airtime(MAX_JUMP_FORCE)
        assert a.x == pytest.approx(100.0 + ticks * MOVE_SPEED)
