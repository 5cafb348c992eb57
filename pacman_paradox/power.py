from __future__ import annotations
import logging
from typing import Iterable

logger = logging.getLogger(__name__)


class PowerMode:
    """Countdown during which every pursuer can be eaten."""

    def __init__(self, duration: float = 10.0):
        self.duration = duration
        self.active = False
        self.remaining = 0.0

    def activate(self, pursuers: Iterable):
        # Re-arming overwrites the countdown; it never stacks past the full duration
        self.active = True
        self.remaining = self.duration
        for pursuer in pursuers:
            pursuer.set_vulnerable(True)
        logger.debug("power mode on for %.1fs", self.duration)

    def update(self, dt: float, pursuers: Iterable) -> bool:
        """Count down; returns True on the tick power mode runs out."""
        if not self.active:
            return False
        self.remaining -= dt
        if self.remaining > 0:
            return False
        self.deactivate(pursuers)
        return True

    def deactivate(self, pursuers: Iterable):
        self.active = False
        self.remaining = 0.0
        for pursuer in pursuers:
            pursuer.set_vulnerable(False)
        logger.debug("power mode off")
