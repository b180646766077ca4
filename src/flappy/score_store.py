# src/flappy/score_store.py
"""
Best-score persistence.

Both stores expose get() -> int and set(int). JsonScoreStore never lets a
filesystem problem reach the game: when the file cannot be read or written it
logs a warning and keeps serving the value it holds in memory for this
session. A readable file with bad content counts as 0 and is overwritten by
the next set().
"""
from __future__ import annotations
import json
import logging
import os
from pathlib import Path

from .config import SCORE_FILE_DEFAULT, SCORE_FILE_ENV

logger = logging.getLogger(__name__)


def default_score_path() -> Path:
    return Path(os.environ.get(SCORE_FILE_ENV) or SCORE_FILE_DEFAULT).expanduser()


class MemoryScoreStore:
    """Session-only cell. Used by tests and the agent environment."""
    def __init__(self, value: int = 0):
        self._value = int(value)

    def get(self) -> int:
        return self._value

    def set(self, value: int) -> None:
        self._value = int(value)


class JsonScoreStore:
    def __init__(self, path: str | Path | None = None):
        self.path = Path(path).expanduser() if path is not None else default_score_path()
        self._cache: int | None = None
        self.degraded = False   # True once the file could not be used

    def get(self) -> int:
        if self._cache is None:
            self._cache = self._read()
        return self._cache

    def set(self, value: int) -> None:
        self._cache = int(value)
        if self.degraded:
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self.path.with_suffix(self.path.suffix + ".tmp")
            with tmp.open("w", encoding="utf-8") as f:
                json.dump({"high_score": self._cache}, f)
            os.replace(tmp, self.path)
        except OSError as e:
            self._degrade(f"cannot write {self.path}: {e}")

    def _read(self) -> int:
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return 0
        except OSError as e:
            self._degrade(f"cannot read {self.path}: {e}")
            return 0
        except ValueError as e:
            # readable but garbled: start from 0, the next set() rewrites it
            logger.warning("ignoring malformed score file %s: %s", self.path, e)
            return 0
        try:
            value = int(data.get("high_score", 0))
        except (AttributeError, TypeError, ValueError) as e:
            logger.warning("ignoring malformed score file %s: %s", self.path, e)
            return 0
        return max(0, value)

    def _degrade(self, reason: str) -> None:
        self.degraded = True
        logger.warning("%s; high score kept in memory for this session", reason)
