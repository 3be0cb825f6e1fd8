"""duckdash/physics.py — Direct-control movement and charge-jump integrator.

Each step mutates an Actor in place. Steps are ordered by actor.py; this
module does not know about level geometry beyond the ground width and a
support flag handed in by the caller.
"""

from __future__ import annotations

from dataclasses import dataclass

from duckdash.constants import (
    ACTOR_WIDTH,
    CHARGE_RATE,
    GRAVITY,
    MAX_CHARGE,
    MAX_JUMP_FORCE,
    MIN_JUMP_FORCE,
    MOVE_SPEED,
    REST_Y,
)


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------

@dataclass
class MovementIntent:
    """Latest horizontal intent from the host. Both may be held at once."""
    left: bool = False
    right: bool = False


@dataclass
class Actor:
    """Kinematic state of the duck. (x, y) is the top-left corner."""
    x: float = 0.0
    y: float = REST_Y
    x_vel: float = 0.0
    y_vel: float = 0.0
    is_jumping: bool = False
    jump_charge: float = 0.0
    is_charging: bool = False


# ---------------------------------------------------------------------------
# Step 1: Horizontal intent
# ---------------------------------------------------------------------------

def resolve_move_speed(intent: MovementIntent) -> float:
    """Right wins over left; neither means standing still."""
    if intent.right:
        return MOVE_SPEED
    if intent.left:
        return -MOVE_SPEED
    return 0.0


def apply_movement_intent(actor: Actor, intent: MovementIntent) -> None:
    actor.x_vel = resolve_move_speed(intent)


# ---------------------------------------------------------------------------
# Step 2: Jump charge
# ---------------------------------------------------------------------------

def press_charge(actor: Actor) -> bool:
    """Begin charging. Returns False (no-op) if airborne or already charging."""
    if actor.is_jumping or actor.is_charging:
        return False
    actor.is_charging = True
    actor.jump_charge = 0.0
    return True


def apply_charge(actor: Actor) -> None:
    """Accumulate charge while grounded and charging."""
    if not actor.is_charging or actor.is_jumping:
        return
    actor.jump_charge = min(actor.jump_charge + CHARGE_RATE, MAX_CHARGE)


def launch_velocity(charge: float) -> float:
    """Upward launch velocity for a given charge."""
    return min(MIN_JUMP_FORCE - charge, MAX_JUMP_FORCE)


def release_charge(actor: Actor) -> bool:
    """Convert the charge into a jump. Returns False (no-op) without a charge."""
    if not actor.is_charging or actor.is_jumping:
        return False
    actor.y_vel = launch_velocity(actor.jump_charge)
    actor.is_jumping = True
    actor.is_charging = False
    actor.jump_charge = 0.0
    return True


# ---------------------------------------------------------------------------
# Step 3: Horizontal position
# ---------------------------------------------------------------------------

def apply_horizontal(actor: Actor, ground_width: float) -> None:
    max_x = max(0.0, ground_width - ACTOR_WIDTH)
    actor.x = max(0.0, min(actor.x + actor.x_vel, max_x))


# ---------------------------------------------------------------------------
# Step 4–5: Vertical position and landing
# ---------------------------------------------------------------------------

def apply_vertical(actor: Actor, supported: bool) -> bool:
    """Advance y using the velocity from the previous tick.

    Grounded actors stay pinned to the ground while supported; an unsupported
    grounded actor starts to fall and drops any charge in progress. Returns
    True if the actor landed.
    """
    if not actor.is_jumping:
        if supported:
            actor.y = REST_Y
            return False
        actor.is_jumping = True
        actor.is_charging = False
        actor.jump_charge = 0.0

    new_y = actor.y + actor.y_vel
    if supported:
        new_y = min(new_y, REST_Y)
    actor.y = new_y

    if supported and actor.y >= REST_Y:
        actor.is_jumping = False
        actor.y_vel = 0.0
        return True
    return False


# ---------------------------------------------------------------------------
# Step 6: Gravity
# ---------------------------------------------------------------------------

def apply_gravity(actor: Actor) -> None:
    """Accumulate gravity while airborne (after the position update)."""
    if not actor.is_jumping:
        return
    actor.y_vel += GRAVITY


# ---------------------------------------------------------------------------
# Analytic helpers
# ---------------------------------------------------------------------------

def jump_airtime(launch: float) -> int:
    """Ticks from release until landing for a launch velocity on flat ground."""
    ticks = 0
    height = 0.0
    vel = launch
    while True:
        height -= vel
        vel += GRAVITY
        ticks += 1
        if height <= 0.0:
            return ticks


def jump_peak(launch: float) -> float:
    """Maximum height above the resting position for a launch velocity."""
    height = 0.0
    peak = 0.0
    vel = launch
    while vel < 0:
        height -= vel
        vel += GRAVITY
        peak = max(peak, height)
    return peak
