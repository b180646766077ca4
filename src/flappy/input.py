# src/flappy/input.py
from __future__ import annotations
from typing import Callable, Optional, Tuple

import pygame
from pygame import K_SPACE

from .game import FlappyGame, GameState

# (width, height) -> button rect, so buttons follow the window size
ButtonLayout = Callable[[int, int], pygame.Rect]


class InputDispatcher:
    """
    Turns left click, touch and SPACE into the game's single trigger.
    Returning True means the event was consumed; nothing else should act on it.
    Overlay buttons are hit-tested first: Start (idle) starts with a flap,
    Restart (over) resets.
    """
    def __init__(self, game: FlappyGame,
                 start_button: Optional[ButtonLayout] = None,
                 restart_button: Optional[ButtonLayout] = None):
        self.game = game
        self.start_button = start_button
        self.restart_button = restart_button

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEBUTTONDOWN:
            if event.button != 1:
                return False
            # SDL mirrors touches as mouse clicks; the FINGERDOWN already counted
            if not getattr(event, "touch", False):
                self._pointer_down(event.pos)
            return True
        if event.type == pygame.FINGERDOWN:
            # finger coords are normalized 0..1
            pos = (int(event.x * self.game.width), int(event.y * self.game.height))
            self._pointer_down(pos)
            return True
        if event.type == pygame.KEYDOWN and event.key == K_SPACE:
            self.game.on_trigger()
            return True
        return False

    def _pointer_down(self, pos: Tuple[int, int]):
        w, h = self.game.width, self.game.height
        if self.game.state is GameState.IDLE and self.start_button is not None:
            if self.start_button(w, h).collidepoint(pos):
                self.game.start_and_flap()
                return
        if self.game.state is GameState.OVER and self.restart_button is not None:
            if self.restart_button(w, h).collidepoint(pos):
                self.game.reset()
                return
        self.game.on_trigger()
