"""Static configuration: grid, palette, scoring, maze layout and run tunables."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple

# ---------------------------------------------------------------------------
# CONFIGURATION - GRID AND DISPLAY
# ---------------------------------------------------------------------------

TILE_SIZE = 8
SCALE = 3
FPS = 60

# World Dimensions (28x31 playfield)
MAZE_COLS = 28
MAZE_ROWS = 31

HUD_HEIGHT = 70
SCREEN_WIDTH = MAZE_COLS * TILE_SIZE * SCALE
SCREEN_HEIGHT = MAZE_ROWS * TILE_SIZE * SCALE + HUD_HEIGHT

# Colors
BLACK = (0, 0, 0)
WALL_BLUE = (0, 0, 255)
YELLOW = (255, 255, 0)
WHITE = (255, 255, 255)
RED = (255, 0, 0)
PINK = (255, 105, 180)
MAGENTA = (255, 0, 255)
CYAN = (0, 255, 255)
GREEN = (0, 255, 0)
BLUE_FRIGHTENED = (0, 0, 255)
GREY = (150, 150, 150)

# ---------------------------------------------------------------------------
# SCORING
# ---------------------------------------------------------------------------

DOT_POINTS = 10
POWER_POINTS = 50
GHOST_POINTS = 200
CLONE_POINTS = 300
CLEAR_BONUS = 1000

# ---------------------------------------------------------------------------
# EFFECTS
# ---------------------------------------------------------------------------

CLONE_FLASH = (MAGENTA, 0.2)
POWER_FLASH = (YELLOW, 0.3)
SPAWN_BANNER_SECONDS = 2.0

# Minimum swipe displacement (pixels) before a drag turns into a direction
MIN_SWIPE_DISTANCE = 30

HIGH_SCORE_FILE = "pacman_paradox_highscore.json"

# Slack for comparing simulated times built from float ticks
TIME_EPSILON = 1e-9

# ---------------------------------------------------------------------------
# MAZE LAYOUT
# '#' wall, '.' dot, 'o' power pellet over a dot, 'P' player start, ' ' open floor
# ---------------------------------------------------------------------------

MAZE_LAYOUT = [
    "############################",
    "#P.........................#",
    "#.o......................o.#",
    "#...###..............###...#",
    "#...###..............###...#",
    "#...###..............###...#",
    "#..........................#",
    "#..........................#",
    "#............##............#",
    "#............##............#",
    "#.......###..##..###.......#",
    "#.......###..##..###.......#",
    "#.......###..##..###.......#",
    "#............##............#",
    "#............##............#",
    "#............##............#",
    "#............##............#",
    "#............##............#",
    "#............##............#",
    "#............##............#",
    "#...###......##......###...#",
    "#...###......##......###...#",
    "#...###..............###...#",
    "#..........................#",
    "#..........................#",
    "#..........................#",
    "#..........................#",
    "#..........................#",
    "#.o......................o.#",
    "#..........................#",
    "############################",
]


@dataclass(frozen=True)
class PursuerSpec:
    """Starting parameters of one random-walk pursuer."""

    home: Tuple[int, int]
    heading: str
    speed: float
    color: Tuple[int, int, int]


DEFAULT_PURSUERS = (
    PursuerSpec(home=(MAZE_COLS - 2, MAZE_ROWS - 2), heading="LEFT", speed=0.12, color=RED),
    PursuerSpec(home=(1, MAZE_ROWS - 2), heading="RIGHT", speed=0.10, color=PINK),
)


@dataclass(frozen=True)
class GameConfig:
    """Tunables consumed once when a simulation is created."""

    recording_window: float = 25.0
    power_duration: float = 10.0
    base_gap: float = 30.0
    min_gap: float = 15.0
    gap_decay: float = 2.0
    tick: float = 1.0 / FPS
    player_speed: float = 0.15
    player_heading: str = "RIGHT"
    clone_speed: float = 0.15
    pursuers: Tuple[PursuerSpec, ...] = DEFAULT_PURSUERS
    layout: Tuple[str, ...] = field(default_factory=lambda: tuple(MAZE_LAYOUT))

    def __post_init__(self) -> None:
        speeds = [self.player_speed, self.clone_speed] + [p.speed for p in self.pursuers]
        for speed in speeds:
            if not 0.0 < speed <= 1.0:
                raise ValueError(f"speed must be in (0, 1], got {speed}")
        if self.recording_window <= 0:
            raise ValueError("recording_window must be > 0")
        if self.power_duration <= 0:
            raise ValueError("power_duration must be > 0")
        if self.tick <= 0:
            raise ValueError("tick must be > 0")
        if self.min_gap <= 0:
            raise ValueError("min_gap must be > 0")
        if self.min_gap > self.base_gap:
            raise ValueError("min_gap must be <= base_gap")
        if self.gap_decay < 0:
            raise ValueError("gap_decay must be >= 0")
        if not self.layout:
            raise ValueError("layout must have at least one row")
