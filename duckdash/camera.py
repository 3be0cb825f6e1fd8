"""duckdash/camera.py — Dead-zone horizontal camera.

The view stays still until the actor passes the dead zone, then keeps the
actor at the dead-zone edge. No smoothing; a renderer may ease on its side.
"""

from __future__ import annotations

from duckdash.constants import CAMERA_DEAD_ZONE


def camera_offset_for(actor_x: float, dead_zone: float = CAMERA_DEAD_ZONE) -> float:
    """Scroll offset for an actor x position. Zero inside the dead zone."""
    return max(0.0, actor_x - dead_zone)
