"""duckdash/agents/actions.py — Action space and input mapping.

6 discrete actions covering every movement/jump-button combination. A jump
action means "jump button held this tick"; apply_action turns the held state
into the press/release edges the simulation expects.
"""

from __future__ import annotations

from dataclasses import dataclass

from duckdash.simulation import SimState, press_jump, release_jump, set_movement_intent

# Action constants
ACTION_NOOP = 0
ACTION_LEFT = 1
ACTION_RIGHT = 2
ACTION_JUMP = 3
ACTION_LEFT_JUMP = 4
ACTION_RIGHT_JUMP = 5

NUM_ACTIONS = 6


@dataclass(frozen=True)
class ControlState:
    """Buttons held for one tick."""
    left: bool = False
    right: bool = False
    jump_held: bool = False


ACTION_MAP: dict[int, ControlState] = {
    ACTION_NOOP: ControlState(),
    ACTION_LEFT: ControlState(left=True),
    ACTION_RIGHT: ControlState(right=True),
    ACTION_JUMP: ControlState(jump_held=True),
    ACTION_LEFT_JUMP: ControlState(left=True, jump_held=True),
    ACTION_RIGHT_JUMP: ControlState(right=True, jump_held=True),
}


def apply_action(sim: SimState, action: int, prev_jump_held: bool) -> bool:
    """Feed one action into the simulation as intents and jump edges.

    Args:
        sim: Simulation receiving the input.
        action: Discrete action index (0-5).
        prev_jump_held: Whether jump was held on the previous tick.

    Returns:
        The new jump-held flag; the caller passes it back on the next call.
    """
    control = ACTION_MAP[action]
    set_movement_intent(sim, control.left, control.right)
    if control.jump_held and not prev_jump_held:
        press_jump(sim)
    elif prev_jump_held and not control.jump_held:
        release_jump(sim)
    return control.jump_held
