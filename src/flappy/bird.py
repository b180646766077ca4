# src/flappy/bird.py
from __future__ import annotations
import pygame
from dataclasses import dataclass
from .config import (
    BIRD_X, BIRD_START_Y, BIRD_W, BIRD_H, GRAVITY, JUMP_FORCE
)

@dataclass
class Bird:
    """
    The player avatar. TOP-based y (y is the top edge of the collision box).
    - x never changes: the pipes scroll towards the bird
    - one Bird lives for the whole session, reset() between rounds
    """
    x: float = float(BIRD_X)
    y: float = float(BIRD_START_Y)
    vy: float = 0.0
    w: int = BIRD_W
    h: int = BIRD_H
    start_y: float = float(BIRD_START_Y)

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.x), int(self.y), self.w, self.h)

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def reset(self):
        self.y = self.start_y
        self.vy = 0.0

    def flap(self):
        """Impulse: velocity is set (not added) to the jump constant."""
        self.vy = JUMP_FORCE

    def update_physics(self, dt_ms: float = 0.0):
        """
        One simulation step. Gravity and velocity are fixed per-frame
        increments; dt_ms is accepted for the frame contract but not used,
        so the game runs at the pace of the frame rate.
        """
        self.vy += GRAVITY
        self.y += self.vy

    def out_of_bounds(self, surface_height: float) -> bool:
        return self.top < 0 or self.bottom > surface_height
