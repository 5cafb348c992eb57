from __future__ import annotations
from typing import Optional, Tuple

import pygame

from .config import MIN_SWIPE_DISTANCE
from .maze import Direction

DIR_KEYS = {
    pygame.K_a: Direction.LEFT, pygame.K_LEFT: Direction.LEFT,
    pygame.K_d: Direction.RIGHT, pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_w: Direction.UP, pygame.K_UP: Direction.UP,
    pygame.K_s: Direction.DOWN, pygame.K_DOWN: Direction.DOWN,
}


def swipe_direction(dx: float, dy: float, min_distance: float = MIN_SWIPE_DISTANCE) -> Optional[Direction]:
    """Direction of a drag; the dominant axis wins and short drags are ignored."""
    if abs(dx) > abs(dy):
        if abs(dx) > min_distance:
            return Direction.RIGHT if dx > 0 else Direction.LEFT
    elif abs(dy) > min_distance:
        return Direction.DOWN if dy > 0 else Direction.UP
    return None


class SwipeTracker:
    """Turns press/release pairs (mouse or touch) into swipe directions."""

    def __init__(self, min_distance: float = MIN_SWIPE_DISTANCE):
        self.min_distance = min_distance
        self.start: Optional[Tuple[float, float]] = None

    def begin(self, pos: Tuple[float, float]):
        self.start = pos

    def end(self, pos: Tuple[float, float]) -> Optional[Direction]:
        if self.start is None:
            return None
        dx = pos[0] - self.start[0]
        dy = pos[1] - self.start[1]
        self.start = None
        return swipe_direction(dx, dy, self.min_distance)
