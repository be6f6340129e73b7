# highscore.py
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional, Union

from .config import CFG

logger = logging.getLogger(__name__)

DEFAULT_PATH = Path.home() / ".classic_snake" / "highscore.json"
KEY = "high_score"


def default_path() -> Path:
    override = os.environ.get(CFG.highscore_env)
    return Path(override).expanduser() if override else DEFAULT_PATH


class HighScoreStore:
    """Single integer high score kept in a small JSON file."""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else default_path()

    def load(self) -> int:
        """Read the stored score; anything missing or malformed counts as 0."""
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            value = int(data.get(KEY, 0))
        except FileNotFoundError:
            return 0
        except (OSError, ValueError, TypeError, AttributeError, OverflowError) as e:
            logger.warning("Ignoring unreadable high score file %s: %s", self.path, e)
            return 0
        if value < 0:
            logger.warning("Ignoring negative high score %d in %s", value, self.path)
            return 0
        return value

    def save(self, score: int) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump({KEY: int(score)}, f)
        except OSError as e:
            logger.warning("Could not save high score to %s: %s", self.path, e)


class MemoryHighScoreStore:
    """In-process store, handy for tests and throwaway sessions."""

    def __init__(self, value: int = 0):
        self.value = value

    def load(self) -> int:
        return self.value

    def save(self, score: int) -> None:
        self.value = int(score)
