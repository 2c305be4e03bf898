# level.py
"""One maze grid plus the moving obstacles parsed out of it.

Coordinates: grid cells are (row, col); pixel space has its origin at the
top-left corner of the grid and y grows downward. Views that draw with a
bottom-left origin flip y themselves.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, NamedTuple, Sequence

from settings import (
    OBSTACLE_SPEED, OBSTACLE_SIZE_FACTOR, OBSTACLE_RADIUS,
    WALL, FLOOR, GOAL, OBST,
)

# fill_rect(left, top, width, height, color, radius=0)
FillRect = Callable[..., None]


class Tile(Enum):
    FLOOR = 0
    WALL = 1
    START = 2
    GOAL = 3
    OBSTACLE = "M"   # input only, never left in a Level's grid

    @classmethod
    def parse(cls, raw: Any) -> Tile:
        if isinstance(raw, Tile):
            return raw
        # bool is an int subclass; True must not read as a wall
        if isinstance(raw, bool):
            raise ValueError(f"Not a tile code: {raw!r}")
        try:
            return cls(raw)
        except ValueError:
            raise ValueError(f"Not a tile code: {raw!r}") from None


class Cell(NamedTuple):
    row: int
    col: int


@dataclass(frozen=True)
class Rect:
    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def around(cls, cx: float, cy: float, w: float, h: float) -> Rect:
        return cls(cx - w / 2, cy - h / 2, cx + w / 2, cy + h / 2)

    def overlaps(self, other: Rect) -> bool:
        # Touching edges count as a hit
        return not (
            self.right < other.left
            or self.left > other.right
            or self.bottom < other.top
            or self.top > other.bottom
        )


class Obstacle:
    """Rectangle patrolling one column between min_row and max_row (inclusive)."""

    def __init__(self, col: int, row: int, min_row: int, max_row: int,
                 tile_size: float, speed: float = OBSTACLE_SPEED):
        self.col = col
        self.row = row
        self.min_row = min_row
        self.max_row = max_row
        self.tile_size = tile_size
        self.speed = speed

        self.x = col * tile_size + tile_size / 2
        self.y = row * tile_size + tile_size / 2
        self.direction = 1   # 1 = down, -1 = up
        self.width = tile_size * OBSTACLE_SIZE_FACTOR
        self.height = tile_size * OBSTACLE_SIZE_FACTOR
        self.min_y = min_row * tile_size + tile_size / 2
        self.max_y = max_row * tile_size + tile_size / 2

    def update(self):
        self.y += self.speed * self.direction
        if self.y >= self.max_y:
            self.y = self.max_y
            self.direction = -1
        elif self.y <= self.min_y:
            self.y = self.min_y
            self.direction = 1

    def reset(self):
        self.y = self.row * self.tile_size + self.tile_size / 2
        self.direction = 1

    def bounds(self) -> Rect:
        return Rect.around(self.x, self.y, self.width, self.height)

    def draw(self, fill_rect: FillRect):
        b = self.bounds()
        fill_rect(b.left, b.top, self.width, self.height, OBST, radius=OBSTACLE_RADIUS)

    def __repr__(self) -> str:
        return (f"Obstacle(col={self.col}, row={self.row}, rows={self.min_row}..{self.max_row}, "
                f"y={self.y:.1f}, dir={self.direction})")


def find_start(grid: Sequence[Sequence[Any]]) -> Cell | None:
    """First start tile of a raw grid in row-major order, or None."""
    for r, row in enumerate(grid):
        for c, v in enumerate(row):
            if not isinstance(v, bool) and v in (Tile.START, Tile.START.value):
                return Cell(r, c)
    return None


class Level:
    def __init__(self, grid: Sequence[Sequence[Any]], tile_size: float):
        if tile_size <= 0:
            raise ValueError("tile_size must be positive")
        if not grid or not grid[0]:
            raise ValueError("Level grid must be non-empty")
        width = len(grid[0])
        if any(len(row) != width for row in grid):
            raise ValueError("Level grid must be rectangular")

        # Parsed copy; the caller's rows are never touched
        self._grid: list[list[Tile]] = [[Tile.parse(v) for v in row] for row in grid]
        self.ts = tile_size
        self.start: Cell | None = None
        self.obstacles: list[Obstacle] = []

        for r in range(self.rows()):
            for c in range(self.cols()):
                t = self._grid[r][c]
                if t is Tile.START:
                    if self.start is None:
                        self.start = Cell(r, c)
                    self._grid[r][c] = Tile.FLOOR
                elif t is Tile.OBSTACLE:
                    min_row, max_row = self._travel_rows(r, c)
                    self.obstacles.append(Obstacle(c, r, min_row, max_row, self.ts))
                    self._grid[r][c] = Tile.FLOOR

    def _travel_rows(self, r: int, c: int) -> tuple[int, int]:
        min_row = r
        while min_row - 1 >= 0 and self._grid[min_row - 1][c] is not Tile.WALL:
            min_row -= 1
        max_row = r
        while max_row + 1 < self.rows() and self._grid[max_row + 1][c] is not Tile.WALL:
            max_row += 1
        return min_row, max_row

    # ---------- Size ----------
    def rows(self) -> int:
        return len(self._grid)

    def cols(self) -> int:
        return len(self._grid[0])

    def pixel_width(self) -> float:
        return self.cols() * self.ts

    def pixel_height(self) -> float:
        return self.rows() * self.ts

    @property
    def grid(self) -> tuple[tuple[Tile, ...], ...]:
        return tuple(tuple(row) for row in self._grid)

    # ---------- Tile queries ----------
    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.rows() and 0 <= c < self.cols()

    def tile_at(self, r: int, c: int) -> Tile:
        """Tile at (r, c). Out-of-bounds cells raise IndexError; check in_bounds first."""
        if not self.in_bounds(r, c):
            raise IndexError(f"Cell ({r}, {c}) outside {self.rows()}x{self.cols()} grid")
        return self._grid[r][c]

    def is_wall(self, r: int, c: int) -> bool:
        return self.tile_at(r, c) is Tile.WALL

    def is_goal(self, r: int, c: int) -> bool:
        return self.tile_at(r, c) is Tile.GOAL

    def is_walkable(self, r: int, c: int) -> bool:
        return self.in_bounds(r, c) and not self.is_wall(r, c)

    # ---------- Obstacles ----------
    def update_obstacles(self):
        for o in self.obstacles:
            o.update()

    def reset_obstacles(self):
        for o in self.obstacles:
            o.reset()

    def check_obstacle_collision(self, player_rect: Rect) -> bool:
        return any(player_rect.overlaps(o.bounds()) for o in self.obstacles)

    # ---------- Draw ----------
    def draw(self, fill_rect: FillRect):
        ts = self.ts
        for r, row in enumerate(self._grid):
            for c, t in enumerate(row):
                fill_rect(c * ts, r * ts, ts, ts, WALL if t is Tile.WALL else FLOOR)
                if t is Tile.GOAL:
                    fill_rect(c * ts + 4, r * ts + 4, ts - 8, ts - 8, GOAL, radius=6)
        # obstacles on top of tiles
        for o in self.obstacles:
            o.draw(fill_rect)

    def __repr__(self) -> str:
        return f"Level({self.rows()}x{self.cols()}, start={self.start}, obstacles={len(self.obstacles)})"
