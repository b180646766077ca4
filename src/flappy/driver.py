# src/flappy/driver.py
from __future__ import annotations
from typing import Callable, Optional

import pygame

FrameCallback = Callable[[float], None]   # receives a timestamp in ms


class FrameDriver:
    """
    update(delta_ms) then draw(), once per frame, forever.
    Runs whatever the game state is so idle/game-over screens keep animating.
    The scheduler decides when frames happen (real clock or synthetic).
    """
    def __init__(self, update: Callable[[float], None], draw: Callable[[], None], scheduler):
        self.update = update
        self.draw = draw
        self.scheduler = scheduler
        self.last_ts: Optional[float] = None
        self.frames = 0

    def start(self):
        self.scheduler.schedule_next_frame(self._frame)

    def _frame(self, timestamp: float):
        delta = 0.0 if self.last_ts is None else timestamp - self.last_ts
        self.last_ts = timestamp
        self.update(delta)
        self.draw()
        self.frames += 1
        self.scheduler.schedule_next_frame(self._frame)


class ManualScheduler:
    """Deterministic scheduler: frames only happen when advance() is called."""
    def __init__(self, start_ms: float = 0.0):
        self.now = start_ms
        self._pending: Optional[FrameCallback] = None

    def schedule_next_frame(self, callback: FrameCallback):
        self._pending = callback

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def advance(self, ms: float = 1000.0 / 60, frames: int = 1):
        """Fire `frames` frames, each `ms` after the previous one."""
        for _ in range(frames):
            cb = self._pending
            if cb is None:
                return
            self._pending = None
            cb(self.now)
            self.now += ms


class PygameScheduler:
    """
    Real loop on pygame.time.Clock. Before every frame the event queue is
    pumped through on_event, so input lands synchronously between frames.
    run() returns on pygame.QUIT or stop().
    """
    def __init__(self, fps: int, on_event: Callable[[pygame.event.Event], None]):
        self.fps = fps
        self.on_event = on_event
        self.clock = pygame.time.Clock()
        self._pending: Optional[FrameCallback] = None
        self._running = False

    def schedule_next_frame(self, callback: FrameCallback):
        self._pending = callback

    def stop(self):
        self._running = False

    def run(self):
        self._running = True
        while self._running and self._pending is not None:
            self.clock.tick(self.fps)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self._running = False
                    break
                self.on_event(event)
            if not self._running:
                break
            cb, self._pending = self._pending, None
            cb(float(pygame.time.get_ticks()))
