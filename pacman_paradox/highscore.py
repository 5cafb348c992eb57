from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)


class HighScoreStore:
    """Best score persisted as a small JSON file.

    When the file cannot be read or written the store keeps working from memory
    for the rest of the session. ``path=None`` gives a memory-only store.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else None
        self.best = 0

    def load(self) -> int:
        if self.path is None or not self.path.exists():
            return self.best
        try:
            with open(self.path, 'r') as f:
                data = json.load(f)
            value = int(data["high_score"])
        except (OSError, ValueError, KeyError, TypeError) as exc:
            logger.warning("could not read high score from %s: %s", self.path, exc)
            return self.best
        self.best = max(self.best, value)
        return self.best

    def save(self, candidate: int) -> bool:
        """Record ``candidate``; True iff it beats the stored best."""
        if candidate <= self.best:
            return False
        self.best = candidate
        logger.info("new high score %d", candidate)
        if self.path is not None:
            try:
                with open(self.path, 'w') as f:
                    json.dump({"high_score": candidate}, f)
            except OSError as exc:
                logger.warning("could not save high score to %s: %s", self.path, exc)
        return True
