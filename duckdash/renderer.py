"""duckdash/renderer.py — Pyxel primitives renderer.

All visuals drawn with Pyxel primitives, no .pyxres assets. World coordinates
are scaled by RENDER_SCALE and shifted by the camera offset; the renderer only
reads what GameCore exposes.
"""

from __future__ import annotations

import pyxel

from duckdash.actor import ActorSnapshot
from duckdash.constants import (
    ACTOR_HEIGHT,
    ACTOR_WIDTH,
    GROUND_Y,
    INITIAL_LIVES,
    RENDER_SCALE,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
)
from duckdash.level import Block, Finish, Gap, Level

# ---------------------------------------------------------------------------
# Palette
# ---------------------------------------------------------------------------

_BASE_PALETTE = {
    0: 0x93C5FD,   # Sky blue (background / cls color)
    1: 0x854D0E,   # Ground brown
    2: 0x16A34A,   # Block green
    3: 0x1F2937,   # Flag pole
    4: 0xFDE047,   # Duck body yellow
    5: 0xFB923C,   # Beak and feet orange
    6: 0xDC2626,   # Flag and hearts red
    7: 0xFFFFFF,   # UI white / eye
    8: 0x000000,   # Pupil
    9: 0x22C55E,   # Start / win accent
}


def init_palette() -> None:
    """Set the palette colors. Call after pyxel.init()."""
    for slot, color in _BASE_PALETTE.items():
        pyxel.colors[slot] = color


# ---------------------------------------------------------------------------
# Coordinates
# ---------------------------------------------------------------------------

def world_to_screen(x: float, y: float, camera_offset: float) -> tuple[int, int]:
    """Map a world point to screen pixels."""
    return (
        int((x - camera_offset) * RENDER_SCALE),
        int(y * RENDER_SCALE),
    )


def _scaled(length: float) -> int:
    return max(1, int(length * RENDER_SCALE))


# ---------------------------------------------------------------------------
# Level
# ---------------------------------------------------------------------------

def draw_level(level: Level, camera_offset: float) -> None:
    """Ground strip with gaps cut out, then blocks and the finish flag."""
    gx, gy = world_to_screen(0, GROUND_Y, camera_offset)
    pyxel.rect(gx, gy, _scaled(level.ground_width), SCREEN_HEIGHT - gy, 1)

    for obstacle in level.obstacles:
        if isinstance(obstacle, Gap):
            x, y = world_to_screen(obstacle.x, GROUND_Y, camera_offset)
            pyxel.rect(x, y, _scaled(obstacle.width), SCREEN_HEIGHT - y, 0)
        elif isinstance(obstacle, Block):
            x, y = world_to_screen(
                obstacle.x, GROUND_Y - obstacle.height, camera_offset,
            )
            pyxel.rect(x, y, _scaled(obstacle.width), _scaled(obstacle.height), 2)
        elif isinstance(obstacle, Finish):
            _draw_finish(obstacle, camera_offset)


def _draw_finish(finish: Finish, camera_offset: float) -> None:
    """Pole centered on the finish footprint, pennant at the top."""
    x, top = world_to_screen(
        finish.x + finish.width / 2, GROUND_Y - finish.height, camera_offset,
    )
    _, bottom = world_to_screen(0, GROUND_Y, camera_offset)
    pyxel.line(x, top, x, bottom, 3)
    pyxel.tri(x + 1, top, x + 1, top + 8, x + 12, top + 4, 6)


# ---------------------------------------------------------------------------
# Duck
# ---------------------------------------------------------------------------

def draw_duck(snap: ActorSnapshot, camera_offset: float) -> None:
    """Duck body, head, beak and feet, mirrored by facing."""
    x, y = world_to_screen(snap.x, snap.y, camera_offset)
    w = _scaled(ACTOR_WIDTH)
    h = _scaled(ACTOR_HEIGHT)
    d = snap.facing

    # Body
    pyxel.elli(x, y + h // 3, w, h // 2, 4)

    # Head
    head_cx = x + w // 2 + d * (w // 4)
    head_cy = y + h // 4
    pyxel.circ(head_cx, head_cy, h // 5, 4)

    # Eye
    pyxel.pset(head_cx + d, head_cy - 1, 8)

    # Beak
    beak_x = head_cx + d * (h // 5)
    pyxel.tri(beak_x, head_cy - 1, beak_x, head_cy + 2, beak_x + d * 5, head_cy + 1, 5)

    # Feet
    foot_y = y + h - 1
    pyxel.line(x + w // 3 - 2, foot_y, x + w // 3 + 2, foot_y, 5)
    pyxel.line(x + 2 * w // 3 - 2, foot_y, x + 2 * w // 3 + 2, foot_y, 5)


# ---------------------------------------------------------------------------
# HUD
# ---------------------------------------------------------------------------

def _draw_heart(x: int, y: int, filled: bool) -> None:
    col = 6 if filled else 3
    pyxel.circ(x + 2, y + 2, 2, col)
    pyxel.circ(x + 6, y + 2, 2, col)
    pyxel.tri(x, y + 3, x + 8, y + 3, x + 4, y + 8, col)


def draw_hud(lives: int, level_index: int) -> None:
    """Draw HUD overlay in screen space."""
    for i in range(INITIAL_LIVES):
        _draw_heart(4 + i * 12, 4, i < lives)
    pyxel.text(SCREEN_WIDTH - 48, 5, f"LEVEL {level_index + 1}", 7)


def draw_debug_hud(snap: ActorSnapshot, camera_offset: float, frame: int) -> None:
    """Debug overlay: position, camera and frame counter."""
    lines = [
        f"X:{snap.x:7.1f}  Y:{snap.y:6.1f}",
        f"CAM:{camera_offset:6.1f}",
        f"F:{frame}",
    ]
    for i, line in enumerate(lines):
        pyxel.text(4, 18 + i * 8, line, 7)


# ---------------------------------------------------------------------------
# Phase screens
# ---------------------------------------------------------------------------

def _draw_centered(text: str, y: int, col: int) -> None:
    pyxel.text(SCREEN_WIDTH // 2 - len(text) * 2, y, text, col)


def draw_start_screen(frame_count: int) -> None:
    _draw_centered("START", SCREEN_HEIGHT // 2 - 16, 7)
    if frame_count % 60 < 40:
        _draw_centered("PRESS ENTER", SCREEN_HEIGHT // 2 + 4, 9)


def draw_dead_screen(frame_count: int) -> None:
    _draw_centered("UM...", SCREEN_HEIGHT // 2 - 16, 6)
    if frame_count % 60 < 40:
        _draw_centered("PRESS ENTER TO TRY AGAIN", SCREEN_HEIGHT // 2 + 4, 7)


def draw_win_screen(frame_count: int) -> None:
    _draw_centered("YIPPEE!", SCREEN_HEIGHT // 2 - 16, 9)
    if frame_count % 60 < 40:
        _draw_centered("PRESS ENTER TO PLAY AGAIN", SCREEN_HEIGHT // 2 + 4, 7)
