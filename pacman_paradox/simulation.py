"""Per-tick simulation of one PACMAN PARADOX run.

A tick runs to completion in a fixed order:

1. apply the queued player direction
2. move the player, the random-walk ghosts and the clones
3. record history while the recording window is open, then spawn any clone
   that is due
4. collect dots and power pellets
5. resolve pursuer collisions (eat or die)
6. regenerate the dots once all are eaten
7. count down power mode

Nothing here touches pygame; the app layer reads ``snapshot()`` and the events
returned from ``step()``.
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from enum import Enum, auto
from random import Random
from typing import FrozenSet, List, Optional, Tuple

from .actors import Mover, MoverKind, Player, RandomWalkPursuer, ReplayPursuer
from .config import (
    CLEAR_BONUS, CLONE_FLASH, CLONE_POINTS, CYAN, DOT_POINTS, GHOST_POINTS, GREEN,
    MAGENTA, POWER_FLASH, POWER_POINTS, SPAWN_BANNER_SECONDS, YELLOW, GameConfig,
)
from .highscore import HighScoreStore
from .history import HistoryRecorder
from .maze import Cell, Direction, Maze
from .power import PowerMode
from .spawner import CloneSpawner, SpawnSchedule
from .state import RunState, RunStatus

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# EVENTS AND VIEWS
# ---------------------------------------------------------------------------


class EventKind(Enum):
    CLONE_SPAWNED = auto()
    SCREEN_FLASH = auto()
    POWER_MODE_STARTED = auto()
    POWER_MODE_ENDED = auto()
    PURSUER_COLLECTED = auto()
    DOTS_CLEARED = auto()
    GAME_OVER = auto()


@dataclass(frozen=True)
class GameEvent:
    kind: EventKind
    color: Optional[tuple] = None
    duration: float = 0.0
    points: int = 0
    message: str = ""
    new_high_score: bool = False


@dataclass(frozen=True)
class EntityView:
    kind: MoverKind
    cell: Cell
    heading: Direction
    color: tuple
    vulnerable: bool = False


@dataclass(frozen=True)
class StatusLabel:
    text: str
    color: tuple


@dataclass(frozen=True)
class Snapshot:
    """Read-only picture of a run after a tick, enough to draw a frame."""

    player: EntityView
    pursuers: Tuple[EntityView, ...]
    walls: FrozenSet[Cell]
    dots: FrozenSet[Cell]
    power_pellets: FrozenSet[Cell]
    score: int
    high_score: int
    elapsed: float
    status: StatusLabel
    run_status: RunStatus
    paused: bool


def view_of(mover: Mover) -> EntityView:
    return EntityView(mover.kind, mover.cell, mover.heading, mover.color,
                      getattr(mover, "vulnerable", False))


def status_label(run: RunState, recording_window: float) -> StatusLabel:
    if run.power.active:
        return StatusLabel(f"POWER: {math.ceil(run.power.remaining)}s", YELLOW)
    if run.recording:
        left = max(0, math.ceil(recording_window - run.elapsed))
        return StatusLabel(f"RECORDING: {left}s", CYAN)
    return StatusLabel(f"CLONES: {run.clone_count}", GREEN)


# ---------------------------------------------------------------------------
# SIMULATION
# ---------------------------------------------------------------------------


class Simulation:
    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[Random] = None,
                 store: Optional[HighScoreStore] = None):
        self.config = config or GameConfig()
        self.maze = Maze.from_layout(self.config.layout)
        self.rng = rng if rng is not None else Random()
        self.store = store if store is not None else HighScoreStore()
        self.high_score = self.store.load()
        self.start_cell = self.maze.player_start or (1, 1)
        self.schedule = SpawnSchedule()
        self.spawner = CloneSpawner(self.config, self.schedule, self.start_cell)
        self.run: Optional[RunState] = None
        self.paused = False
        self.queued_direction: Optional[Direction] = None

    # --- RUN LIFECYCLE ---

    def start_run(self) -> RunState:
        """Discard any previous run and start a fresh one."""
        self.end_run()
        cfg = self.config
        player = Player(self.start_cell, Direction[cfg.player_heading], cfg.player_speed)
        ghosts = [
            RandomWalkPursuer(spec.home, Direction[spec.heading], spec.speed, spec.color)
            for spec in cfg.pursuers
        ]
        recorder = HistoryRecorder(cfg.recording_window)
        recorder.record_if_moved(player.cell, player.heading, 0.0)
        self.run = RunState(
            generation=self.schedule.begin_run(),
            player=player,
            ghosts=ghosts,
            recorder=recorder,
            power=PowerMode(cfg.power_duration),
            dots=set(self.maze.dot_cells),
            power_pellets=set(self.maze.power_cells),
        )
        self.paused = False
        self.queued_direction = None
        logger.info("run %d started", self.run.generation)
        return self.run

    def end_run(self):
        """Void the current run and every clone it still had scheduled."""
        if self.run is None:
            return
        if self.run.playing:
            self.run.status = RunStatus.ENDED
            logger.info("run %d ended with score %d", self.run.generation, self.run.score)
        self.schedule.cancel()

    def restart(self) -> RunState:
        return self.start_run()

    def toggle_pause(self) -> bool:
        if self.run is not None and self.run.playing:
            self.paused = not self.paused
        return self.paused

    @property
    def running(self) -> bool:
        return self.run is not None and self.run.playing

    def set_direction(self, direction: Direction):
        self.queued_direction = direction

    # --- TICK ---

    def step(self) -> List[GameEvent]:
        run = self.run
        if run is None or not run.playing or self.paused:
            return []
        dt = self.config.tick
        events: List[GameEvent] = []
        # elapsed is always ticks * tick, never a running sum
        run.ticks += 1
        run.elapsed = run.ticks * dt

        if self.queued_direction is not None:
            run.player.set_direction(self.queued_direction)
            self.queued_direction = None

        run.player.update(self.maze, self.rng)
        for ghost in run.ghosts:
            ghost.update(self.maze, self.rng)
        for clone in run.clones:
            clone.update(self.maze, self.rng)

        if run.recording:
            run.recorder.record_if_moved(run.player.cell, run.player.heading, run.elapsed)
            if run.recorder.window_elapsed(run.elapsed):
                run.recorder.freeze()
                clone = self.spawner.on_window_elapsed(run)
                if clone is not None:
                    events.extend(self._clone_events(clone))
        for clone in self.spawner.poll(run):
            events.extend(self._clone_events(clone))

        self._collect_pickups(run, events)

        if self._resolve_collisions(run, events):
            return events

        if not run.dots and self.maze.dot_cells:
            run.score += CLEAR_BONUS
            run.dots = set(self.maze.dot_cells)
            events.append(GameEvent(EventKind.DOTS_CLEARED, points=CLEAR_BONUS))
            logger.debug("all dots eaten, board refilled")

        if run.power.update(dt, run.pursuers):
            events.append(GameEvent(EventKind.POWER_MODE_ENDED))
        return events

    def _clone_events(self, clone: ReplayPursuer) -> List[GameEvent]:
        color, duration = CLONE_FLASH
        return [
            GameEvent(EventKind.CLONE_SPAWNED, color=MAGENTA, duration=SPAWN_BANNER_SECONDS,
                      message="CLONE SPAWNED!"),
            GameEvent(EventKind.SCREEN_FLASH, color=color, duration=duration),
        ]

    def _collect_pickups(self, run: RunState, events: List[GameEvent]):
        cell = run.player.cell
        if cell in run.dots:
            run.dots.discard(cell)
            run.score += DOT_POINTS
        if cell in run.power_pellets:
            run.power_pellets.discard(cell)
            run.score += POWER_POINTS
            run.power.activate(run.pursuers)
            color, duration = POWER_FLASH
            events.append(GameEvent(EventKind.POWER_MODE_STARTED, duration=run.power.duration))
            events.append(GameEvent(EventKind.SCREEN_FLASH, color=color, duration=duration))

    def _resolve_collisions(self, run: RunState, events: List[GameEvent]) -> bool:
        """Eat or die against every pursuer on the player's cell; True on game over."""
        for pursuer in run.pursuers:
            if pursuer.cell != run.player.cell:
                continue
            if run.power.active and pursuer.vulnerable:
                if pursuer.kind is MoverKind.CLONE:
                    points = CLONE_POINTS
                    run.remove_clone(pursuer)
                else:
                    points = GHOST_POINTS
                    pursuer.respawn()
                run.score += points
                events.append(GameEvent(EventKind.PURSUER_COLLECTED, points=points))
                logger.debug("ate %s for %d", pursuer.kind.name.lower(), points)
            else:
                self._game_over(run, events)
                return True
        return False

    def _game_over(self, run: RunState, events: List[GameEvent]):
        run.status = RunStatus.GAME_OVER
        self.schedule.cancel()
        new_high = self.store.save(run.score)
        self.high_score = self.store.best
        events.append(GameEvent(EventKind.GAME_OVER, points=run.score, new_high_score=new_high))
        logger.info("game over at %.1fs with score %d", run.elapsed, run.score)

    # --- VIEW ---

    def snapshot(self) -> Optional[Snapshot]:
        run = self.run
        if run is None:
            return None
        return Snapshot(
            player=view_of(run.player),
            pursuers=tuple(view_of(p) for p in run.pursuers),
            walls=self.maze.walls,
            dots=frozenset(run.dots),
            power_pellets=frozenset(run.power_pellets),
            score=run.score,
            high_score=max(self.high_score, run.score),
            elapsed=run.elapsed,
            status=status_label(run, self.config.recording_window),
            run_status=run.status,
            paused=self.paused,
        )
