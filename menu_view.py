# menu_view.py
from __future__ import annotations
from pathlib import Path
import arcade
from settings import TITLE, TILE_SIZE, BG, BLACK, GRAY

MENU_SIZE = (480, 320)


class MenuView(arcade.View):
    def __init__(self, levels_path: str | Path | None = None, tile_size: int = TILE_SIZE):
        super().__init__()
        self.levels_path = levels_path
        self.tile_size = tile_size

        w, h = MENU_SIZE
        self.title_text = arcade.Text(TITLE, w/2, h*0.62, BLACK, 32, anchor_x="center")
        self.sub_text = arcade.Text("Press ENTER to Play", w/2, h*0.46, BLACK, 18, anchor_x="center")
        self.help_text = arcade.Text("WASD/Arrows = Move    ESC = Pause    R = Restart",
                                     w/2, h*0.32, GRAY, 12, anchor_x="center")

    def on_show_view(self):
        arcade.set_background_color(BG)
        if self.window.get_size() != MENU_SIZE:
            self.window.set_size(*MENU_SIZE)

    def on_draw(self):
        self.clear()
        self.title_text.draw()
        self.sub_text.draw()
        self.help_text.draw()

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol in (arcade.key.ENTER, arcade.key.RETURN):
            from game_view import GameView
            self.window.show_view(GameView(self.levels_path, self.tile_size))
