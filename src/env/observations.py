# src/env/observations.py
from __future__ import annotations
import numpy as np
from ..flappy.config import PIPE_GAP

MAX_VY = 12.0   # |vy| normalization (px/frame); a flap is -5.5

OBS_LOW = np.array([0.0, -1.0, 0.0, 0.0, 0.0], dtype=np.float32)
OBS_HIGH = np.array([1.0, 1.0, 1.0, 1.0, 1.0], dtype=np.float32)


def build_observation(game) -> np.ndarray:
    """
    Compact vector for an agent, shape (5,), float32:
      [y_norm, vy_norm, next_pipe_dx_norm, gap_top_norm, gap_bottom_norm]
    Without a pipe ahead, dx is 1.0 and the gate is taken as the whole screen
    middle (centered gap) so the agent just holds altitude.
    """
    bird = game.bird
    h = float(max(1, game.height))
    w = float(max(1, game.width))

    y_norm = bird.y / max(1.0, h - bird.h)
    vy_norm = bird.vy / MAX_VY

    pipe = game.next_pipe()
    if pipe is None:
        dx_norm = 1.0
        gap_top = (h - PIPE_GAP) / 2.0
    else:
        dx_norm = (pipe.x - bird.x) / w
        gap_top = pipe.top
    gap_bottom = gap_top + PIPE_GAP

    obs = np.array([y_norm, vy_norm, dx_norm, gap_top / h, gap_bottom / h], dtype=np.float32)
    return np.clip(obs, OBS_LOW, OBS_HIGH)
