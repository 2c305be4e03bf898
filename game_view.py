# game_view.py
from __future__ import annotations
import logging
from pathlib import Path
import arcade

from settings import (
    TILE_SIZE, LEVELS_PATH, BG, BLACK, HUD_SIZE,
)
from level import Level
from level_loader import load_levels
from session import GameSession
from pause_view import PauseView

log = logging.getLogger(__name__)

# key -> (dr, dc)
MOVE_KEYS = {
    arcade.key.LEFT: (0, -1), arcade.key.A: (0, -1),
    arcade.key.RIGHT: (0, 1), arcade.key.D: (0, 1),
    arcade.key.UP: (-1, 0), arcade.key.W: (-1, 0),
    arcade.key.DOWN: (1, 0), arcade.key.S: (1, 0),
}


class GameView(arcade.View):
    def __init__(self, levels_path: str | Path | None = None, tile_size: int = TILE_SIZE):
        super().__init__()
        self.levels_path = levels_path or LEVELS_PATH
        self.tile_size = tile_size
        self.hud_text = arcade.Text("", 10, 0, BLACK, HUD_SIZE)
        self.restarted = False

        levels = load_levels(self.levels_path, tile_size)
        self.session = GameSession(levels, tile_size, on_level_loaded=self._fit_window)

    def on_show_view(self):
        arcade.set_background_color(BG)
        self._fit_window(self.session.level)

    def _fit_window(self, level: Level):
        # Window matches the active level's pixel size
        w, h = int(level.pixel_width()), int(level.pixel_height())
        if self.window is not None and self.window.get_size() != (w, h):
            self.window.set_size(w, h)
            log.debug("window resized to %dx%d", w, h)
        self.hud_text.y = h - 18

    # ---------- Input ----------
    def on_key_press(self, symbol: int, modifiers: int):
        if symbol in MOVE_KEYS:
            self.session.move(*MOVE_KEYS[symbol])
        elif symbol == arcade.key.R:
            self.session.restart_level()
        elif symbol == arcade.key.ESCAPE:
            self.window.show_view(PauseView(self))
        elif symbol == arcade.key.M:
            from menu_view import MenuView
            self.window.show_view(MenuView(self.levels_path, self.tile_size))

    # ---------- Update ----------
    def on_update(self, dt: float):
        # Obstacles move a fixed distance per frame, dt is not used
        self.restarted = self.session.tick()

    # ---------- Draw ----------
    def _fill_rect(self, left, top, width, height, color, radius=0):
        """Top-left pixel space -> arcade's bottom-left.

        A radius of half the shorter side or more draws a circle; smaller
        radii are drawn with square corners.
        """
        bottom = self.session.level.pixel_height() - top - height
        if radius > 0 and radius >= min(width, height) / 2:
            arcade.draw_circle_filled(left + width / 2, bottom + height / 2,
                                      min(width, height) / 2, color)
            return
        arcade.draw_lbwh_rectangle_filled(left, bottom, width, height, color)

    def on_draw(self):
        self.clear()
        self.session.level.draw(self._fill_rect)
        self.session.player.draw(self._fill_rect)

        # no HUD on the frame the level restarted
        if self.restarted:
            return
        self.hud_text.text = self.session.hud_text()
        self.hud_text.draw()
