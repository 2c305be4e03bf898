# settings.py
from pathlib import Path

TITLE = "Maze Dash"
TILE_SIZE = 32
UPDATE_RATE = 1 / 60          # one obstacle tick per frame

LEVELS_PATH = Path(__file__).parent / "levels" / "levels.json"
DEFAULT_SPAWN = (1, 1)        # (row, col) when a level has no start tile

# Obstacles
OBSTACLE_SPEED = 1.8          # px per tick
OBSTACLE_SIZE_FACTOR = 0.8    # of tile size
OBSTACLE_RADIUS = 4

# Player hitbox is smaller than obstacles on purpose
PLAYER_SIZE_FACTOR = 0.6

# Colors (RGBA)
BG = (240, 240, 240, 255)
WALL = (30, 50, 60, 255)
FLOOR = (232, 232, 232, 255)
GOAL = (255, 200, 120, 200)
OBST = (220, 50, 50, 255)
PLAYER_COLOR = (60, 120, 220, 255)
BLACK = (0, 0, 0, 255)
WHITE = (220, 220, 220, 255)
GRAY = (150, 150, 150, 255)
HUD_SIZE = 14
