from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Set

from .actors import Player, RandomWalkPursuer, ReplayPursuer
from .history import HistoryRecorder
from .maze import Cell
from .power import PowerMode


class RunStatus(Enum):
    PLAYING = auto()
    GAME_OVER = auto()
    ENDED = auto()


@dataclass
class RunState:
    """Everything that lives for exactly one run; discarded on game over or restart."""

    generation: int
    player: Player
    ghosts: List[RandomWalkPursuer]
    recorder: HistoryRecorder
    power: PowerMode
    dots: Set[Cell] = field(default_factory=set)
    power_pellets: Set[Cell] = field(default_factory=set)
    clones: List[ReplayPursuer] = field(default_factory=list)
    score: int = 0
    ticks: int = 0
    elapsed: float = 0.0
    spawn_count: int = 0
    clone_count: int = 0
    status: RunStatus = RunStatus.PLAYING

    @property
    def recording(self) -> bool:
        return self.recorder.active

    @property
    def playing(self) -> bool:
        return self.status is RunStatus.PLAYING

    @property
    def pursuers(self) -> list:
        return [*self.ghosts, *self.clones]

    def remove_clone(self, clone: ReplayPursuer) -> bool:
        if clone not in self.clones:
            return False
        self.clones.remove(clone)
        self.clone_count = max(0, self.clone_count - 1)
        return True
