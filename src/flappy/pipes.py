# src/flappy/pipes.py
from __future__ import annotations
import logging
import math
import random
from dataclasses import dataclass
from typing import Sequence, Tuple
import pygame
from .config import PIPE_GAP, PIPE_WIDTH, PIPE_SPACING, PIPE_MIN_HEIGHT

logger = logging.getLogger(__name__)


class SurfaceTooSmallError(ValueError):
    """The surface cannot fit a gate plus two minimum-height pipe segments."""


@dataclass
class Pipe:
    x: float            # left edge, scrolls left every step
    top: float          # gate top = height of the upper segment
    passed: bool = False

    def gate_bottom(self, gap: float = PIPE_GAP) -> float:
        return self.top + gap

    def rects(self, surface_height: float, width: int = PIPE_WIDTH,
              gap: float = PIPE_GAP) -> Tuple[pygame.Rect, pygame.Rect]:
        """(upper, lower) segments in screen coords."""
        bottom = self.gate_bottom(gap)
        upper = pygame.Rect(int(self.x), 0, width, int(self.top))
        lower = pygame.Rect(int(self.x), int(bottom), width, max(0, int(surface_height - bottom)))
        return upper, lower


def pipe_collides(bird, pipe: Pipe, width: int = PIPE_WIDTH, gap: float = PIPE_GAP) -> bool:
    """Bird box overlaps the pipe column AND sticks out of the gate."""
    if bird.x + bird.w > pipe.x and bird.x < pipe.x + width:
        if bird.y < pipe.top or bird.y + bird.h > pipe.top + gap:
            return True
    return False


class PipeGen:
    """
    Produces pipe pairs with a random gate height.
    Seeded like a level generator: seed=None picks one at random and keeps it
    in .seed so a run can be reproduced.
    """
    def __init__(self, seed: int | None = None,
                 gap: float = PIPE_GAP,
                 min_height: float = PIPE_MIN_HEIGHT,
                 spacing: float = PIPE_SPACING):
        if seed is None:
            seed = random.randrange(0, 2**32 - 1)
        self.seed = seed
        self.rng = random.Random(seed)
        self.gap = gap
        self.min_height = min_height
        self.spacing = spacing

    def top_range(self, surface_height: float) -> Tuple[float, float]:
        """Half-open [lo, hi) range for the gate top. Raises if empty."""
        lo = self.min_height
        hi = surface_height - self.gap - self.min_height
        if hi <= lo:
            raise SurfaceTooSmallError(
                f"surface height {surface_height} must exceed gap + 2*min_height "
                f"= {self.gap + 2 * self.min_height}"
            )
        return lo, hi

    def create_pipe(self, surface_width: float, surface_height: float) -> Pipe:
        lo, hi = self.top_range(surface_height)
        top = math.floor(self.rng.random() * (hi - lo)) + lo
        logger.debug("spawn pipe x=%s top=%s", surface_width, top)
        return Pipe(x=float(surface_width), top=float(top))

    def should_spawn(self, pipes: Sequence[Pipe], surface_width: float) -> bool:
        """Spacing is measured in distance travelled by the newest pipe, not in time."""
        if not pipes:
            return True
        return surface_width - pipes[-1].x >= self.spacing
