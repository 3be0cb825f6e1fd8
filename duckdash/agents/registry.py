"""duckdash/agents/registry.py — Agents by name, for scenario files and the CLI."""

from __future__ import annotations

from duckdash.agents.base import Agent
from duckdash.agents.constant import HoldRightAgent, IdleAgent
from duckdash.agents.jump_runner import JumpRunnerAgent
from duckdash.agents.scripted import ScriptedAgent

AGENT_REGISTRY: dict[str, type] = {
    "idle": IdleAgent,
    "hold_right": HoldRightAgent,
    "jump_runner": JumpRunnerAgent,
    "scripted": ScriptedAgent,
}


def resolve_agent(name: str, params: dict | None = None) -> Agent:
    """Instantiate the agent registered as *name* with *params* as kwargs.

    Raises:
        KeyError: If no agent is registered under *name*.
    """
    try:
        cls = AGENT_REGISTRY[name]
    except KeyError:
        raise KeyError(
            f"Unknown agent: {name!r}. Available: {', '.join(sorted(AGENT_REGISTRY))}"
        ) from None
    return cls(**(params or {}))
