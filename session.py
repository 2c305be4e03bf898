# session.py
from __future__ import annotations
import logging
from typing import Callable, Sequence

from level import Level
from player import Player
from settings import DEFAULT_SPAWN, TILE_SIZE

log = logging.getLogger(__name__)


class GameSession:
    """Level collection, active level index and the player.

    Views own one of these and drive it: `tick()` once per frame, `move()`
    on key presses. Nothing here touches the window.
    """

    def __init__(self, levels: Sequence[Level], tile_size: float = TILE_SIZE,
                 on_level_loaded: Callable[[Level], None] | None = None):
        if not levels:
            raise ValueError("GameSession needs at least one level")
        self.levels = list(levels)
        self.index = 0
        self.player = Player(tile_size)
        self.on_level_loaded = on_level_loaded

        self.deaths = 0
        self.levels_cleared = 0

        self.load_level(0)

    @property
    def level(self) -> Level:
        return self.levels[self.index]

    # ---------- Level switching ----------
    def load_level(self, idx: int):
        self.index = idx
        level = self.level

        if level.start is not None:
            self.player.set_cell(*level.start)
        else:
            log.debug("level %d has no start tile, spawning at %s", idx, DEFAULT_SPAWN)
            self.player.set_cell(*DEFAULT_SPAWN)

        level.reset_obstacles()
        if self.on_level_loaded is not None:
            self.on_level_loaded(level)

    def next_level(self):
        # wrap around after the last level
        self.load_level((self.index + 1) % len(self.levels))

    def restart_level(self):
        self.load_level(self.index)

    # ---------- Per frame ----------
    def tick(self) -> bool:
        """Advance obstacles one step. Returns True if the player was hit (level restarted)."""
        level = self.level
        level.update_obstacles()
        if level.check_obstacle_collision(self.player.bounds()):
            self.deaths += 1
            log.info("hit obstacle on level %d at %s, restarting", self.index + 1, self.player.cell)
            self.restart_level()
            return True
        return False

    # ---------- Input ----------
    def move(self, dr: int, dc: int) -> bool:
        moved = self.player.try_move(self.level, dr, dc)
        if moved and self.level.is_goal(self.player.row, self.player.col):
            self.levels_cleared += 1
            log.info("level %d cleared", self.index + 1)
            self.next_level()
        return moved

    def hud_text(self) -> str:
        return (f"Level {self.index + 1}/{len(self.levels)}  -  WASD/Arrows to move"
                f"   Cleared: {self.levels_cleared}   Deaths: {self.deaths}")
