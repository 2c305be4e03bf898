# pause_view.py
import arcade
from settings import WHITE, GRAY

class PauseView(arcade.View):
    def __init__(self, game_view: arcade.View):
        super().__init__()
        self.game_view = game_view
        w, h = self.window.get_size()
        self.title = arcade.Text("Paused", w/2, h/2 + 20, WHITE, 24, anchor_x="center")
        self.hint = arcade.Text("ESC = Resume    M = Menu", w/2, h/2 - 14, GRAY, 14, anchor_x="center")

    def on_draw(self):
        # Draw game behind dim overlay
        self.game_view.on_draw()
        w, h = self.window.get_size()
        arcade.draw_lbwh_rectangle_filled(0, 0, w, h, (0, 0, 0, 140))
        self.title.draw()
        self.hint.draw()

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == arcade.key.ESCAPE:
            self.window.show_view(self.game_view)
        elif symbol in (arcade.key.M,):
            from menu_view import MenuView
            self.window.show_view(MenuView(self.game_view.levels_path, self.game_view.tile_size))
