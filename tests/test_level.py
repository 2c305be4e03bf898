"""
Test suite for Level grid parsing, tile queries and drawing.

Tests cover:
- Grid normalization (start and obstacle markers become floor)
- Start detection and tie-break
- Defensive copy of the input grid
- Dimension and tile queries, out-of-bounds contract
- Obstacle spawning and travel bounds
- Collision queries against owned obstacles
- Draw calls through the fill_rect capability
"""

import pytest
from level import Level, Tile, Cell, Rect, find_start
from settings import WALL, FLOOR, GOAL, OBST


MAZE = [[1, 1, 1], [1, 2, 1], [1, 3, 1]]

PATROL = [
    [1, 1, 1, 1, 1],
    [1, 0, 0, 0, 1],
    [1, 0, "M", 0, 1],
    [1, 0, 0, 0, 1],
    [1, 1, 1, 1, 1],
]


class TestLevelConstruction:
    """Test parsing raw grids into a Level."""

    def test_small_maze_scenario(self):
        level = Level(MAZE, 10)
        assert level.rows() == 3
        assert level.cols() == 3
        assert level.start == Cell(1, 1)
        assert level.start == (1, 1)
        assert level.is_goal(2, 1)
        assert level.is_wall(0, 0)

    def test_start_cell_becomes_floor(self):
        level = Level(MAZE, 10)
        assert not level.is_wall(1, 1)
        assert not level.is_goal(1, 1)
        assert level.tile_at(1, 1) is Tile.FLOOR

    def test_no_start_or_marker_left_in_grid(self):
        level = Level(PATROL, 10)
        tiles = {t for row in level.grid for t in row}
        assert Tile.START not in tiles
        assert Tile.OBSTACLE not in tiles
        assert tiles <= {Tile.FLOOR, Tile.WALL, Tile.GOAL}

    def test_missing_start_is_none(self):
        level = Level([[0, 0], [0, 3]], 10)
        assert level.start is None

    def test_first_start_wins(self):
        level = Level([[0, 2], [2, 0]], 10)
        assert level.start == Cell(0, 1)
        assert level.tile_at(1, 0) is Tile.FLOOR

    def test_input_grid_not_mutated(self):
        grid = [row[:] for row in PATROL]
        grid[1][1] = 2
        before = [row[:] for row in grid]
        Level(grid, 10)
        assert grid == before

    def test_any_number_of_goals(self):
        level = Level([[3, 0, 3], [0, 2, 3]], 10)
        assert level.is_goal(0, 0)
        assert level.is_goal(0, 2)
        assert level.is_goal(1, 2)

    def test_grid_property_is_read_only_copy(self):
        level = Level(MAZE, 10)
        g = level.grid
        assert isinstance(g, tuple)
        assert g[0] == (Tile.WALL, Tile.WALL, Tile.WALL)


class TestLevelValidation:
    """Test rejection of grids that cannot form a Level."""

    def test_empty_grid_rejected(self):
        with pytest.raises(ValueError):
            Level([], 10)

    def test_empty_row_rejected(self):
        with pytest.raises(ValueError):
            Level([[]], 10)

    def test_ragged_grid_rejected(self):
        with pytest.raises(ValueError):
            Level([[1, 1], [1]], 10)

    def test_unknown_code_rejected(self):
        with pytest.raises(ValueError):
            Level([[1, 7]], 10)

    def test_bool_is_not_a_tile(self):
        with pytest.raises(ValueError):
            Level([[True, 0]], 10)

    def test_non_positive_tile_size_rejected(self):
        with pytest.raises(ValueError):
            Level(MAZE, 0)


class TestTileParsing:
    """Test Tile.parse on raw JSON values."""

    @pytest.mark.parametrize("raw,tile", [
        (0, Tile.FLOOR), (1, Tile.WALL), (2, Tile.START), (3, Tile.GOAL), ("M", Tile.OBSTACLE),
    ])
    def test_known_codes(self, raw, tile):
        assert Tile.parse(raw) is tile

    def test_tile_passes_through(self):
        assert Tile.parse(Tile.GOAL) is Tile.GOAL

    def test_lowercase_marker_rejected(self):
        with pytest.raises(ValueError):
            Tile.parse("m")


class TestQueries:
    """Test size and bounds queries."""

    def test_pixel_dimensions(self):
        level = Level([[0, 0, 0, 0], [0, 0, 0, 0]], 32)
        assert level.pixel_width() == 128
        assert level.pixel_height() == 64

    @pytest.mark.parametrize("r,c,expected", [
        (0, 0, True), (2, 2, True), (-1, 0, False), (0, -1, False), (3, 0, False), (0, 3, False),
    ])
    def test_in_bounds(self, r, c, expected):
        assert Level(MAZE, 10).in_bounds(r, c) is expected

    @pytest.mark.parametrize("r,c", [(-1, 0), (0, -1), (3, 0), (0, 3)])
    def test_tile_at_out_of_bounds_raises(self, r, c):
        level = Level(MAZE, 10)
        with pytest.raises(IndexError):
            level.tile_at(r, c)

    def test_is_walkable(self):
        level = Level(MAZE, 10)
        assert level.is_walkable(1, 1)
        assert level.is_walkable(2, 1)
        assert not level.is_walkable(0, 1)
        assert not level.is_walkable(-1, 1)


class TestFindStart:
    """Test the raw-grid start finder."""

    def test_finds_first_in_row_major_order(self):
        assert find_start([[0, 0, 2], [2, 0, 0]]) == Cell(0, 2)

    def test_none_when_absent(self):
        assert find_start([[0, 1], [3, "M"]]) is None

    def test_agrees_with_level_start(self):
        grid = [[1, 0, 0], [0, 2, 2], [2, 0, 3]]
        assert Level(grid, 10).start == find_start(grid)


class TestObstacleSpawning:
    """Test obstacles created from M markers."""

    def test_patrol_scenario(self):
        level = Level(PATROL, 10)
        assert len(level.obstacles) == 1
        o = level.obstacles[0]
        assert (o.col, o.row) == (2, 2)
        assert (o.min_row, o.max_row) == (1, 3)
        assert not level.is_wall(2, 2)
        assert not level.is_goal(2, 2)

    def test_bounds_stop_at_grid_edge(self):
        level = Level([["M"], [0], [0]], 10)
        o = level.obstacles[0]
        assert (o.min_row, o.max_row) == (0, 2)

    def test_start_and_goal_do_not_block_travel(self):
        level = Level([[1, 1], [2, 0], ["M", 0], [3, 0], [1, 1]], 10)
        o = level.obstacles[0]
        assert (o.min_row, o.max_row) == (1, 3)

    def test_one_obstacle_per_marker(self):
        level = Level([["M", 0, "M"], [0, 1, 0], [0, 0, "M"]], 10)
        assert len(level.obstacles) == 3
        assert [(o.row, o.col) for o in level.obstacles] == [(0, 0), (0, 2), (2, 2)]

    def test_walled_in_marker_has_single_row_range(self):
        level = Level([[1], ["M"], [1]], 10)
        o = level.obstacles[0]
        assert (o.min_row, o.max_row) == (1, 1)


class TestCollision:
    """Test Level.check_obstacle_collision."""

    def test_no_obstacles_never_collides(self):
        level = Level(MAZE, 10)
        assert level.check_obstacle_collision(Rect(0, 0, 30, 30)) is False

    def test_overlapping_box_collides(self):
        level = Level(PATROL, 10)
        # obstacle spans 21..29 on both axes
        assert level.check_obstacle_collision(Rect(28, 28, 40, 40))

    def test_disjoint_box_does_not_collide(self):
        level = Level(PATROL, 10)
        assert not level.check_obstacle_collision(Rect(0, 0, 5, 5))

    def test_disjoint_on_one_axis_only(self):
        level = Level(PATROL, 10)
        assert not level.check_obstacle_collision(Rect(30, 21, 40, 29))
        assert not level.check_obstacle_collision(Rect(21, 30, 29, 40))

    def test_collision_is_read_only(self):
        level = Level(PATROL, 10)
        before = level.obstacles[0].bounds()
        level.check_obstacle_collision(Rect(20, 20, 30, 30))
        assert level.obstacles[0].bounds() == before

    def test_update_and_reset_all_obstacles(self):
        level = Level([["M", 0], [0, 0], [0, "M"]], 10)
        initial = [o.bounds() for o in level.obstacles]
        for _ in range(7):
            level.update_obstacles()
        assert [o.bounds() for o in level.obstacles] != initial
        level.reset_obstacles()
        assert [o.bounds() for o in level.obstacles] == initial


class TestDraw:
    """Test Level.draw through a recording fill_rect."""

    @staticmethod
    def record(level):
        calls = []
        level.draw(lambda *args, **kwargs: calls.append((args, kwargs)))
        return calls

    def test_one_rect_per_tile_plus_goal_highlight(self):
        calls = self.record(Level(MAZE, 10))
        assert len(calls) == 9 + 1
        colors = [args[4] for args, _ in calls]
        assert colors.count(WALL) == 7
        assert colors.count(FLOOR) == 2
        assert colors.count(GOAL) == 1

    def test_goal_highlight_is_inset(self):
        calls = self.record(Level(MAZE, 10))
        args, kwargs = next(c for c in calls if c[0][4] == GOAL)
        assert args[:4] == (14, 24, 2, 2)
        assert kwargs["radius"] == 6

    def test_obstacles_drawn_last(self):
        calls = self.record(Level(PATROL, 10))
        assert len(calls) == 25 + 1
        args, _ = calls[-1]
        assert args[4] == OBST
        assert args[0] == pytest.approx(21)
        assert args[1] == pytest.approx(21)
