"""
PACMAN PARADOX
==============
A maze chase where your own past is the enemy:
- Your movement is recorded for the first 25 seconds
- Clones then replay that path on a loop, arriving faster and faster
- Power pellets turn every pursuer, clones included, into points
"""

from .config import GameConfig
from .maze import Direction, Maze
from .simulation import EventKind, GameEvent, Simulation, Snapshot

__all__ = ["Direction", "EventKind", "GameConfig", "GameEvent", "Maze", "Simulation", "Snapshot"]
