"""Tests for pacman_paradox.maze module."""

from __future__ import annotations

from collections import deque

from pacman_paradox.config import MAZE_COLS, MAZE_LAYOUT, MAZE_ROWS
from pacman_paradox.maze import Direction, Maze

# 3x3 cross whose arms run off every edge
CROSS = ("#.#", "...", "#.#")


class TestMazeFromLayout:
    def test_default_layout_dimensions(self) -> None:
        maze = Maze.from_layout(MAZE_LAYOUT)
        assert (maze.width, maze.height) == (MAZE_COLS, MAZE_ROWS)

    def test_player_start_and_pickups(self) -> None:
        maze = Maze.from_layout(MAZE_LAYOUT)
        assert maze.player_start == (1, 1)
        assert maze.power_cells == {(2, 2), (25, 2), (2, 28), (25, 28)}
        assert (1, 1) not in maze.dot_cells
        assert maze.power_cells <= maze.dot_cells
        assert maze.dot_cells.isdisjoint(maze.walls)

    def test_default_layout_is_enclosed(self) -> None:
        maze = Maze.from_layout(MAZE_LAYOUT)
        for x in range(MAZE_COLS):
            assert (x, 0) in maze.walls
            assert (x, MAZE_ROWS - 1) in maze.walls
        for y in range(MAZE_ROWS):
            assert (0, y) in maze.walls
            assert (MAZE_COLS - 1, y) in maze.walls

    def test_every_pickup_is_reachable_from_start(self) -> None:
        maze = Maze.from_layout(MAZE_LAYOUT)
        seen = {maze.player_start}
        queue = deque([maze.player_start])
        while queue:
            cell = queue.popleft()
            for direction in maze.open_directions(cell):
                nxt = maze.neighbor(cell, direction)
                if nxt not in seen:
                    seen.add(nxt)
                    queue.append(nxt)
        assert maze.dot_cells <= seen
        assert maze.power_cells <= seen

    def test_power_pellets_sit_on_dots(self) -> None:
        maze = Maze.from_layout(MAZE_LAYOUT)
        floor = {
            (x, y) for x in range(maze.width) for y in range(maze.height)
            if (x, y) not in maze.walls
        }
        assert maze.dot_cells == floor - {maze.player_start}
        assert Maze.from_layout(("#o#",)).dot_cells == {(1, 0)}

    def test_short_rows_are_padded_with_floor(self) -> None:
        maze = Maze.from_layout(("#.", "#"))
        assert maze.width == 2
        assert maze.is_open((1, 1))


class TestMazeMovement:
    def test_is_open(self) -> None:
        maze = Maze.from_layout(MAZE_LAYOUT)
        assert not maze.is_open((0, 0))
        assert maze.is_open((1, 1))
        assert not maze.is_open((-1, 1))
        assert not maze.is_open((1, MAZE_ROWS))

    def test_can_move_from_corner(self) -> None:
        maze = Maze.from_layout(MAZE_LAYOUT)
        assert maze.can_move((1, 1), Direction.RIGHT)
        assert maze.can_move((1, 1), Direction.DOWN)
        assert not maze.can_move((1, 1), Direction.UP)
        assert not maze.can_move((1, 1), Direction.LEFT)

    def test_neighbor_wraps_horizontally(self) -> None:
        maze = Maze.from_layout(CROSS)
        assert maze.neighbor((0, 1), Direction.LEFT) == (2, 1)
        assert maze.neighbor((2, 1), Direction.RIGHT) == (0, 1)
        assert maze.can_move((0, 1), Direction.LEFT)

    def test_neighbor_wraps_vertically(self) -> None:
        maze = Maze.from_layout(CROSS)
        assert maze.neighbor((1, 0), Direction.UP) == (1, 2)
        assert maze.neighbor((1, 2), Direction.DOWN) == (1, 0)

    def test_wrap_into_wall_is_blocked(self) -> None:
        maze = Maze.from_layout((".#", ".."))
        # (0, 0) -> left wraps to (1, 0), which is a wall
        assert not maze.can_move((0, 0), Direction.LEFT)

    def test_open_directions_order(self) -> None:
        maze = Maze.from_layout(CROSS)
        assert maze.open_directions((1, 1)) == [
            Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT,
        ]

    def test_direction_deltas(self) -> None:
        assert (Direction.UP.dx, Direction.UP.dy) == (0, -1)
        assert (Direction.DOWN.dx, Direction.DOWN.dy) == (0, 1)
        assert (Direction.LEFT.dx, Direction.LEFT.dy) == (-1, 0)
        assert (Direction.RIGHT.dx, Direction.RIGHT.dy) == (1, 0)
