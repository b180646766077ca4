# src/env/flap_env.py
from __future__ import annotations
from typing import Optional, Dict, Any
import numpy as np
import gymnasium as gym
import pygame

from src.flappy.config import WIDTH, HEIGHT, FPS, TITLE
from src.flappy.game import FlappyGame, Command
from src.flappy.pipes import PipeGen
from src.flappy.render import Renderer
from src.flappy.score_store import MemoryScoreStore
from src.env.observations import build_observation, OBS_LOW, OBS_HIGH


class FlapEnv(gym.Env):
    """
    Flappy Gate Gymnasium environment (vector observations).
    - The game advances one fixed frame per update (physics is per-frame).
    - Agent acts every `frame_skip` frames (default 2) -> 30 decisions/sec.
    - Observation: shape (5,), float32, see build_observation.
    """
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": FPS}

    def __init__(self,
                 render_mode: Optional[str] = None,
                 frame_skip: int = 2,
                 max_decisions: Optional[int] = 3000,
                 width: int = WIDTH,
                 height: int = HEIGHT):
        super().__init__()
        assert frame_skip >= 1, "frame_skip must be >= 1"
        assert render_mode is None or render_mode in self.metadata["render_modes"]
        self.render_mode = render_mode
        self.frame_skip = int(frame_skip)
        self.max_decisions = max_decisions
        self.width = width
        self.height = height
        self.frame_ms = 1000.0 / FPS

        # Actions: 0 = NOOP, 1 = FLAP
        self.action_space = gym.spaces.Discrete(2)
        self.observation_space = gym.spaces.Box(low=OBS_LOW, high=OBS_HIGH, dtype=np.float32)

        # --- Runtime state ---
        self.game: Optional[FlappyGame] = None
        self.timestep: int = 0
        self.current_seed: Optional[int] = None

        # Rendering
        self.renderer: Optional[Renderer] = None
        self.screen = None
        self.clock = None
        self._sim_time_s = 0.0

    # -------------------- Core API --------------------

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None):
        super().reset(seed=seed)  # initializes self.np_random

        # A given seed drives the pipe layout directly; otherwise use one drawn from np_random
        drawn = int(self.np_random.integers(0, 2**31 - 1))
        pipe_seed = int(seed) if seed is not None else drawn

        self.game = FlappyGame(MemoryScoreStore(), self.width, self.height, PipeGen(pipe_seed))
        self.game.handle(Command.START)
        self.timestep = 0
        self.current_seed = pipe_seed
        self._sim_time_s = 0.0

        obs = build_observation(self.game)
        info = {"seed": self.current_seed, "score": 0}
        if self.render_mode == "human":
            self.render()
        return obs, info

    def step(self, action):
        assert self.action_space.contains(action), f"Invalid action {action}"
        assert self.game is not None, "call reset() first"
        game = self.game

        if action == 1 and game.running:
            game.handle(Command.IMPULSE)

        score_before = game.score
        for _ in range(self.frame_skip):
            game.update(self.frame_ms)
            self._sim_time_s += self.frame_ms / 1000.0
            if not game.running:
                break

        # Reward: small bonus for surviving, +1 per pipe, -1 on death
        terminated = not game.running
        reward = -1.0 if terminated else 0.1
        reward += float(game.score - score_before)

        self.timestep += 1
        truncated = (self.max_decisions is not None) and (self.timestep >= self.max_decisions) and not terminated

        obs = build_observation(game)
        info = {
            "seed": self.current_seed,
            "score": game.score,
            "timestep": self.timestep,
            "death_cause": game.game_over_reason,
        }
        if self.render_mode == "human":
            self.render()
        return obs, reward, terminated, truncated, info

    # -------------------- Rendering --------------------

    def render(self):
        if self.render_mode is None or self.game is None:
            return None

        if self.renderer is None:
            pygame.init()
            self.renderer = Renderer()
            if self.render_mode == "human":
                self.screen = pygame.display.set_mode((self.width, self.height))
                pygame.display.set_caption(f"{TITLE} — Gym Env")
                self.clock = pygame.time.Clock()
            else:
                self.screen = pygame.Surface((self.width, self.height))

        if self.render_mode == "human":
            # Pump minimal event queue so the OS doesn't think we're hung
            pygame.event.pump()

        self.renderer.draw(self.screen, self.game, self._sim_time_s)

        if self.render_mode == "human":
            pygame.display.flip()
            if self.clock is not None:
                self.clock.tick(self.metadata["render_fps"])
            return None

        # (H, W, 3) uint8
        arr = pygame.surfarray.array3d(self.screen)  # (W, H, 3)
        return np.transpose(arr, (1, 0, 2))

    def close(self):
        if self.screen is not None and self.render_mode == "human":
            pygame.display.quit()
        if self.renderer is not None:
            pygame.quit()
        self.screen = None
        self.clock = None
        self.renderer = None
