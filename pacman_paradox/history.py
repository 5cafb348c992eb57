from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple

from .config import TIME_EPSILON
from .maze import Cell, Direction


@dataclass(frozen=True)
class HistorySample:
    cell: Cell
    heading: Direction
    time: float


class HistoryRecorder:
    """Collects the player's distinct cells during the opening recording window.

    Once the window has elapsed the buffer is frozen for the rest of the run and
    only ever handed out as immutable snapshots.
    """

    def __init__(self, window: float = 25.0):
        self.window = window
        self.samples: List[HistorySample] = []
        self.active = True

    def record_if_moved(self, cell: Cell, heading: Direction, sim_time: float) -> bool:
        if not self.active:
            return False
        if self.samples and self.samples[-1].cell == cell:
            return False
        self.samples.append(HistorySample(cell, heading, sim_time))
        return True

    def window_elapsed(self, sim_time: float) -> bool:
        return sim_time >= self.window - TIME_EPSILON

    def freeze(self):
        self.active = False

    def snapshot(self) -> Tuple[HistorySample, ...]:
        return tuple(self.samples)

    def __len__(self) -> int:
        return len(self.samples)
