"""Grid model shared by every mover: walls, bounds wrap and pickup placement."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, List, Optional, Sequence, Tuple

Cell = Tuple[int, int]


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


# Order used when scanning for open headings
DIRECTIONS = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


@dataclass(frozen=True)
class Maze:
    width: int
    height: int
    walls: FrozenSet[Cell]
    dot_cells: FrozenSet[Cell]
    power_cells: FrozenSet[Cell]
    player_start: Optional[Cell] = None

    @classmethod
    def from_layout(cls, layout: Sequence[str]) -> "Maze":
        """Parse an ASCII layout; rows shorter than the widest are padded with floor."""
        height = len(layout)
        width = max(len(row) for row in layout)
        walls, dots, power = set(), set(), set()
        player_start = None
        for y, row in enumerate(layout):
            for x, char in enumerate(row):
                if char == '#':
                    walls.add((x, y))
                elif char == '.':
                    dots.add((x, y))
                elif char == 'o':
                    # a power pellet sits on top of an ordinary dot
                    dots.add((x, y))
                    power.add((x, y))
                elif char == 'P':
                    player_start = (x, y)
        return cls(width, height, frozenset(walls), frozenset(dots), frozenset(power), player_start)

    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def is_open(self, cell: Cell) -> bool:
        return self.in_bounds(cell) and cell not in self.walls

    def wrap(self, cell: Cell) -> Cell:
        return (cell[0] % self.width, cell[1] % self.height)

    def neighbor(self, cell: Cell, direction: Direction) -> Cell:
        """Adjacent cell in ``direction``, wrapped to the opposite edge past a bound."""
        return self.wrap((cell[0] + direction.dx, cell[1] + direction.dy))

    def can_move(self, cell: Cell, direction: Direction) -> bool:
        return self.is_open(self.neighbor(cell, direction))

    def open_directions(self, cell: Cell) -> List[Direction]:
        return [d for d in DIRECTIONS if self.can_move(cell, d)]
