# src/tests/helpers.py
from src.flappy.score_store import MemoryScoreStore


class RecordingStore(MemoryScoreStore):
    """MemoryScoreStore that remembers every set() call."""
    def __init__(self, value: int = 0):
        super().__init__(value)
        self.writes = []

    def set(self, value: int) -> None:
        self.writes.append(value)
        super().set(value)
