# src/tests/conftest.py
import os

# Headless pygame for every test (must be set before pygame opens a display)
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from src.flappy.game import FlappyGame
from src.flappy.pipes import PipeGen
from src.tests.helpers import RecordingStore


@pytest.fixture
def store():
    return RecordingStore()


@pytest.fixture
def make_game():
    def _make(store=None, width=800, height=600, seed=7):
        return FlappyGame(store if store is not None else RecordingStore(),
                          width, height, PipeGen(seed))
    return _make
