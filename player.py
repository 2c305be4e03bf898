# player.py
from __future__ import annotations

from level import Cell, FillRect, Level, Rect
from settings import PLAYER_SIZE_FACTOR, PLAYER_COLOR


class Player:
    """Tile-based player: lives on a grid cell, moves one cell per key press."""

    def __init__(self, tile_size: float, row: int = 0, col: int = 0):
        self.tile_size = tile_size
        self.row = row
        self.col = col

    @property
    def cell(self) -> Cell:
        return Cell(self.row, self.col)

    def set_cell(self, row: int, col: int):
        self.row = row
        self.col = col

    def pixel_x(self) -> float:
        return self.col * self.tile_size + self.tile_size / 2

    def pixel_y(self) -> float:
        return self.row * self.tile_size + self.tile_size / 2

    def size(self) -> float:
        return self.tile_size * PLAYER_SIZE_FACTOR

    def bounds(self) -> Rect:
        s = self.size()
        return Rect.around(self.pixel_x(), self.pixel_y(), s, s)

    def try_move(self, level: Level, dr: int, dc: int) -> bool:
        """Step one cell if the target is inside the grid and not a wall."""
        r, c = self.row + dr, self.col + dc
        if not level.is_walkable(r, c):
            return False
        self.set_cell(r, c)
        return True

    def draw(self, fill_rect: FillRect):
        b = self.bounds()
        s = self.size()
        fill_rect(b.left, b.top, s, s, PLAYER_COLOR, radius=s / 2)
