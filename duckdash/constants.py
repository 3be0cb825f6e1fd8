"""duckdash/constants.py — Tuning values for the simulation and host.

All distances are world units (origin top-left, y grows downward). All rates
are per tick.
"""

# ---------------------------------------------------------------------------
# Timing
# ---------------------------------------------------------------------------

TICK_MS = 16
FPS = 1000 // TICK_MS

# ---------------------------------------------------------------------------
# Actor
# ---------------------------------------------------------------------------

ACTOR_WIDTH = 40.0
ACTOR_HEIGHT = 40.0

MOVE_SPEED = 5.0
GRAVITY = 0.8

# Jump forces are upward velocities, so "stronger" means more negative.
MIN_JUMP_FORCE = -15.0
MAX_JUMP_FORCE = -25.0
CHARGE_RATE = 1.5
MAX_CHARGE = abs(MAX_JUMP_FORCE - MIN_JUMP_FORCE)

# ---------------------------------------------------------------------------
# World
# ---------------------------------------------------------------------------

GROUND_Y = 480.0
REST_Y = GROUND_Y - ACTOR_HEIGHT

START_X = 50.0
START_Y = REST_Y

GAP_FALL_TOLERANCE = 20.0
PROGRESS_MARGIN = 100.0

# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------

INITIAL_LIVES = 3

# ---------------------------------------------------------------------------
# Camera
# ---------------------------------------------------------------------------

CAMERA_DEAD_ZONE = 300.0

# ---------------------------------------------------------------------------
# Host (Pyxel)
# ---------------------------------------------------------------------------

RENDER_SCALE = 0.5
SCREEN_WIDTH = 400
SCREEN_HEIGHT = 280
