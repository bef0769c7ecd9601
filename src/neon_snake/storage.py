# storage.py
import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)


class HighScoreStore:
    """Plain-text high score file. I/O faults are logged, never raised."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self.best = 0

    def load(self) -> int:
        try:
            text = self.path.read_text(encoding="utf-8")
            self.best = max(0, int(text.strip() or "0"))
        except FileNotFoundError:
            self.best = 0
        except (OSError, ValueError) as exc:
            logger.warning("could not read high score from %s: %s", self.path, exc)
            self.best = 0
        return self.best

    def save(self, score: int) -> bool:
        """Write `score` through if it beats the stored value. Returns True if written."""
        if score <= self.best:
            return False
        self.best = score
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(str(score), encoding="utf-8")
        except OSError as exc:
            logger.warning("could not write high score to %s: %s", self.path, exc)
            return False
        return True
