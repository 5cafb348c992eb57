from __future__ import annotations
from enum import Enum, auto
from random import Random
from typing import Sequence, Tuple

from .config import BLUE_FRIGHTENED, MAGENTA, YELLOW
from .history import HistorySample
from .maze import Cell, Direction, Maze

# ---------------------------------------------------------------------------
# ACTOR CLASSES
# ---------------------------------------------------------------------------


class MoverKind(Enum):
    PLAYER = auto()
    GHOST = auto()
    CLONE = auto()


class ReplayState(Enum):
    ADVANCING = auto()
    LOOPING = auto()
    HOLDING = auto()


class Mover:
    """Grid mover whose position only changes on commit ticks.

    Each update adds ``speed`` to ``move_counter``; once the counter reaches 1
    the counter is reset to 0 (the remainder is dropped) and ``commit`` runs.
    """

    kind: MoverKind

    def __init__(self, cell: Cell, heading: Direction, speed: float, color: tuple):
        self.cell = cell
        self.heading = heading
        self.speed = speed
        self.move_counter = 0.0
        self.color = color
        self.start_cell = cell
        self.start_heading = heading

    def update(self, maze: Maze, rng: Random) -> bool:
        """Advance one tick; returns True when this tick was a commit tick."""
        self.move_counter += self.speed
        if self.move_counter < 1:
            return False
        self.move_counter = 0.0
        self.commit(maze, rng)
        return True

    def commit(self, maze: Maze, rng: Random) -> None:
        raise NotImplementedError

    def reset(self):
        self.cell = self.start_cell
        self.heading = self.start_heading
        self.move_counter = 0.0


class Player(Mover):
    kind = MoverKind.PLAYER

    def __init__(self, cell: Cell, heading: Direction = Direction.RIGHT, speed: float = 0.15):
        super().__init__(cell, heading, speed, YELLOW)
        self.next_heading = heading

    def set_direction(self, heading: Direction):
        """Queue a direction change"""
        self.next_heading = heading

    def commit(self, maze: Maze, rng: Random) -> None:
        # Turn only when the queued heading leads somewhere; keep it queued otherwise
        if maze.can_move(self.cell, self.next_heading):
            self.heading = self.next_heading
        if maze.can_move(self.cell, self.heading):
            self.cell = maze.neighbor(self.cell, self.heading)


class RandomWalkPursuer(Mover):
    kind = MoverKind.GHOST

    def __init__(self, home: Cell, heading: Direction, speed: float, color: tuple):
        super().__init__(home, heading, speed, color)
        self.base_color = color
        self.vulnerable = False

    @property
    def home(self) -> Cell:
        return self.start_cell

    def commit(self, maze: Maze, rng: Random) -> None:
        valid = maze.open_directions(self.cell)
        if not valid:
            return
        if self.heading not in valid:
            self.heading = rng.choice(valid)
        self.cell = maze.neighbor(self.cell, self.heading)

    def set_vulnerable(self, vulnerable: bool):
        self.vulnerable = vulnerable
        self.color = BLUE_FRIGHTENED if vulnerable else self.base_color

    def respawn(self):
        """Send back home after being eaten; dangerous again immediately."""
        self.reset()
        self.set_vulnerable(False)


class ReplayPursuer(Mover):
    """Clone that walks a frozen copy of the player's movement history on a loop."""

    kind = MoverKind.CLONE

    def __init__(self, cell: Cell, history: Sequence[HistorySample], speed: float = 0.15,
                 heading: Direction = Direction.RIGHT, clone_id: int = 0):
        super().__init__(cell, heading, speed, MAGENTA)
        self.history: Tuple[HistorySample, ...] = tuple(history)
        self.cursor = 0
        self.vulnerable = False
        self.clone_id = clone_id

    @property
    def state(self) -> ReplayState:
        if not self.history:
            return ReplayState.HOLDING
        if self.cursor >= len(self.history):
            return ReplayState.LOOPING
        return ReplayState.ADVANCING

    def commit(self, maze: Maze, rng: Random) -> None:
        if not self.history:
            return
        if not 0 <= self.cursor < len(self.history):
            self.cursor = 0
        sample = self.history[self.cursor]
        self.cell = sample.cell
        self.heading = sample.heading
        self.cursor += 1

    def set_vulnerable(self, vulnerable: bool):
        self.vulnerable = vulnerable
        self.color = BLUE_FRIGHTENED if vulnerable else MAGENTA

