"""Clone scheduling.

Spawns are queued against simulated time rather than wall-clock timers. Every
entry carries the generation of the run that scheduled it; ending a run bumps
the generation, so an entry that comes due later is recognised as stale and
dropped instead of materialising a clone in the next run.
"""

from __future__ import annotations
import heapq
import logging
from typing import List, Optional, Tuple

from .actors import ReplayPursuer
from .config import TIME_EPSILON, GameConfig
from .maze import Cell, Direction
from .state import RunState

logger = logging.getLogger(__name__)


def spawn_gap(spawn_count: int, base_gap: float = 30.0, min_gap: float = 15.0,
              decay: float = 2.0) -> float:
    """Seconds until the next clone once ``spawn_count`` clones exist."""
    return max(min_gap, base_gap - decay * spawn_count)


class SpawnSchedule:
    def __init__(self):
        self.generation = 0
        self._pending: List[Tuple[float, int]] = []

    def begin_run(self) -> int:
        self.generation += 1
        return self.generation

    def cancel(self):
        """Void everything scheduled so far."""
        self.generation += 1

    def schedule(self, due: float, generation: int):
        heapq.heappush(self._pending, (due, generation))

    def pop_due(self, now: float, generation: int) -> int:
        """Remove entries due at ``now``; returns how many belong to ``generation``."""
        count = 0
        while self._pending and self._pending[0][0] <= now + TIME_EPSILON:
            due, entry_generation = heapq.heappop(self._pending)
            if entry_generation != generation or entry_generation != self.generation:
                logger.debug("discarding stale spawn due at %.2fs (generation %d)", due, entry_generation)
                continue
            count += 1
        return count

    def pending(self, generation: Optional[int] = None) -> List[float]:
        generation = self.generation if generation is None else generation
        return sorted(due for due, gen in self._pending if gen == generation)


class CloneSpawner:
    """Turns the recorder's buffer into replaying clones on an accelerating cadence."""

    def __init__(self, config: GameConfig, schedule: SpawnSchedule, spawn_cell: Cell):
        self.config = config
        self.schedule = schedule
        self.spawn_cell = spawn_cell

    def next_gap(self, spawn_count: int) -> float:
        return spawn_gap(spawn_count, self.config.base_gap, self.config.min_gap, self.config.gap_decay)

    def on_window_elapsed(self, run: RunState) -> Optional[ReplayPursuer]:
        return self.spawn(run)

    def poll(self, run: RunState) -> List[ReplayPursuer]:
        spawned = []
        for _ in range(self.schedule.pop_due(run.elapsed, run.generation)):
            clone = self.spawn(run)
            if clone is not None:
                spawned.append(clone)
        return spawned

    def spawn(self, run: RunState) -> Optional[ReplayPursuer]:
        if not run.playing or run.generation != self.schedule.generation:
            return None
        run.spawn_count += 1
        run.clone_count += 1
        clone = ReplayPursuer(
            self.spawn_cell,
            run.recorder.snapshot(),
            speed=self.config.clone_speed,
            heading=Direction.RIGHT,
            clone_id=run.spawn_count,
        )
        run.clones.append(clone)
        gap = self.next_gap(run.spawn_count)
        self.schedule.schedule(run.elapsed + gap, run.generation)
        logger.info("clone #%d spawned with %d history samples", run.spawn_count, len(clone.history))
        logger.debug("next clone due at %.2fs (gap %.1fs)", run.elapsed + gap, gap)
        return clone
