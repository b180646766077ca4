# src/flappy/game.py
from __future__ import annotations
import logging
from enum import Enum
from typing import List, Optional

from .bird import Bird
from .config import WIDTH, HEIGHT, PIPE_WIDTH, PIPE_GAP, PIPE_SPEED
from .pipes import Pipe, PipeGen, pipe_collides

logger = logging.getLogger(__name__)


class GameState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    OVER = "over"


class Command(Enum):
    START = "start"
    IMPULSE = "impulse"
    RESET = "reset"


# The one command each state accepts from a trigger
_TRIGGER_COMMAND = {
    GameState.IDLE: Command.START,
    GameState.RUNNING: Command.IMPULSE,
    GameState.OVER: Command.RESET,
}


class FlappyGame:
    """
    Owns the whole simulation: bird, pipes, score, state.

    IDLE --START--> RUNNING --collision--> OVER --RESET--> IDLE
    RUNNING --IMPULSE--> RUNNING

    Commands are applied synchronously, so a trigger received between two
    frames is already visible to the next update().
    """
    def __init__(self, store, width: int = WIDTH, height: int = HEIGHT,
                 pipe_gen: Optional[PipeGen] = None):
        self.store = store
        self.width = width
        self.height = height
        self.pipe_gen = pipe_gen if pipe_gen is not None else PipeGen()
        self.bird = Bird()
        self.pipes: List[Pipe] = []
        self.score = 0
        self.high_score = int(store.get())
        self.state = GameState.IDLE
        self.game_over_reason: Optional[str] = None   # "bounds" | "pipe" | None

    # -------------------- Commands --------------------

    def handle(self, command: Command) -> bool:
        """Apply a command if the current state accepts it. Returns True if applied."""
        if command is Command.START and self.state is GameState.IDLE:
            self.state = GameState.RUNNING
            logger.info("round started (seed=%s)", self.pipe_gen.seed)
            return True
        if command is Command.IMPULSE and self.state is GameState.RUNNING:
            self.bird.flap()
            return True
        if command is Command.RESET and self.state is GameState.OVER:
            self.reset()
            return True
        return False

    def on_trigger(self) -> bool:
        return self.handle(_TRIGGER_COMMAND[self.state])

    def start_and_flap(self) -> bool:
        """Start button: begin the round with a flap already applied."""
        if not self.handle(Command.START):
            return False
        return self.handle(Command.IMPULSE)

    def reset(self):
        self.bird.reset()
        self.pipes = []
        self.score = 0
        self.game_over_reason = None
        self.state = GameState.IDLE
        logger.info("reset to idle")

    def resize(self, width: int, height: int):
        self.width = width
        self.height = height

    # -------------------- Simulation --------------------

    def update(self, dt_ms: float = 0.0):
        if self.state is not GameState.RUNNING:
            return

        self.bird.update_physics(dt_ms)

        if self.pipe_gen.should_spawn(self.pipes, self.width):
            self.pipes.append(self.pipe_gen.create_pipe(self.width, self.height))

        # Scroll, score and cull
        kept: List[Pipe] = []
        for pipe in self.pipes:
            pipe.x -= PIPE_SPEED
            if not pipe.passed and pipe.x + PIPE_WIDTH < self.bird.x:
                self.score += 1
                pipe.passed = True
            if pipe.x + PIPE_WIDTH >= 0:
                kept.append(pipe)
        self.pipes = kept

        if self.bird.out_of_bounds(self.height):
            self._game_over("bounds")
            return

        for pipe in self.pipes:
            if pipe_collides(self.bird, pipe, PIPE_WIDTH, PIPE_GAP):
                self._game_over("pipe")
                return

    def _game_over(self, reason: str):
        self.state = GameState.OVER
        self.game_over_reason = reason
        logger.info("game over (%s) score=%d", reason, self.score)
        if self.score > self.high_score:
            self.high_score = self.score
            self.store.set(self.score)
            logger.info("new high score %d", self.score)

    # -------------------- Read helpers --------------------

    @property
    def running(self) -> bool:
        return self.state is GameState.RUNNING

    def next_pipe(self) -> Optional[Pipe]:
        """Leftmost pipe whose right edge is still ahead of the bird's left edge."""
        for pipe in self.pipes:
            if pipe.x + PIPE_WIDTH >= self.bird.x:
                return pipe
        return None
