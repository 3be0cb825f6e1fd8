"""duckdash/main.py — Pyxel host and entry point.

Polls the keyboard once per frame, forwards intents and jump edges to
GameCore, ticks it once, and draws whatever it exposes. Arrow keys move,
space charges and releases the jump, Enter starts or resets, Q quits.
"""

import logging

import pyxel

from duckdash import renderer
from duckdash.constants import FPS, SCREEN_HEIGHT, SCREEN_WIDTH
from duckdash.debug import DEBUG, configure_logging
from duckdash.game import GameCore
from duckdash.simulation import GamePhase

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------

class App:
    def __init__(self):
        pyxel.init(SCREEN_WIDTH, SCREEN_HEIGHT, title="Duck Dash", fps=FPS)
        renderer.init_palette()

        self.game = GameCore()
        logger.debug("host started at %d fps", FPS)

        pyxel.run(self.update, self.draw)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def update(self):
        if pyxel.btnp(pyxel.KEY_Q):
            pyxel.quit()

        if pyxel.btnp(pyxel.KEY_RETURN):
            self.game.start_or_reset()

        self.game.set_movement_intent(
            left=pyxel.btn(pyxel.KEY_LEFT),
            right=pyxel.btn(pyxel.KEY_RIGHT),
        )
        if pyxel.btnp(pyxel.KEY_SPACE):
            self.game.press_jump()
        if pyxel.btnr(pyxel.KEY_SPACE):
            self.game.release_jump()

        self.game.tick()

    def draw(self):
        pyxel.cls(0)

        phase = self.game.phase
        if phase == GamePhase.START:
            renderer.draw_start_screen(pyxel.frame_count)
        elif phase == GamePhase.PLAYING:
            self._draw_gameplay()
        elif phase == GamePhase.DEAD:
            renderer.draw_dead_screen(pyxel.frame_count)
        elif phase == GamePhase.WIN:
            renderer.draw_win_screen(pyxel.frame_count)

    # ------------------------------------------------------------------
    # PLAYING
    # ------------------------------------------------------------------

    def _draw_gameplay(self):
        camera = self.game.camera_offset
        snap = self.game.actor_snapshot()

        renderer.draw_level(self.game.current_level(), camera)
        renderer.draw_duck(snap, camera)
        renderer.draw_hud(self.game.lives, self.game.level_index)
        if DEBUG:
            renderer.draw_debug_hud(snap, camera, self.game.sim.frame)


def main() -> None:
    configure_logging()
    App()


if __name__ == "__main__":
    main()
