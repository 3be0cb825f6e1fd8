"""duckdash/agents — Discrete action space and the agents that drive it."""

from duckdash.agents.actions import (
    ACTION_JUMP,
    ACTION_LEFT,
    ACTION_LEFT_JUMP,
    ACTION_MAP,
    ACTION_NOOP,
    ACTION_RIGHT,
    ACTION_RIGHT_JUMP,
    NUM_ACTIONS,
    ControlState,
    apply_action,
)
from duckdash.agents.base import Agent
from duckdash.agents.constant import ConstantAgent, HoldRightAgent, IdleAgent
from duckdash.agents.jump_runner import JumpRunnerAgent
from duckdash.agents.registry import AGENT_REGISTRY, resolve_agent
from duckdash.agents.scripted import ScriptedAgent
