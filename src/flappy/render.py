# src/flappy/render.py
from __future__ import annotations
import math
from typing import Dict, Optional, Tuple

import pygame

from .config import (
    PIPE_WIDTH, PIPE_GAP, PIPE_LIP_W, PIPE_LIP_H, BIRD_ROTATION_PER_VY,
    CLOUD_COUNT, CLOUD_SPEED, CLOUD_SPREAD_X, CLOUD_BASE_Y, CLOUD_STEP_Y,
    COLOR_SKY_TOP, COLOR_SKY_BOTTOM, COLOR_CLOUD, COLOR_BIRD, COLOR_OUTLINE,
    COLOR_PIPE_LIGHT, COLOR_PIPE_DARK, COLOR_FG, COLOR_HINT, COLOR_PANEL,
    COLOR_BUTTON, COLOR_BUTTON_EDGE,
    FONT_NAME, FONT_SIZE_SCORE, FONT_SIZE_TITLE, FONT_SIZE_TEXT,
    BUTTON_W, BUTTON_H, TITLE,
)
from .game import FlappyGame, GameState

Color = Tuple[int, int, int]


def _lerp_color(a: Color, b: Color, t: float) -> Color:
    return (
        int(a[0] + (b[0] - a[0]) * t),
        int(a[1] + (b[1] - a[1]) * t),
        int(a[2] + (b[2] - a[2]) * t),
    )


def start_button_rect(width: int, height: int) -> pygame.Rect:
    r = pygame.Rect(0, 0, BUTTON_W, BUTTON_H)
    r.center = (width // 2, height // 2 + 40)
    return r


def restart_button_rect(width: int, height: int) -> pygame.Rect:
    r = pygame.Rect(0, 0, BUTTON_W, BUTTON_H)
    r.center = (width // 2, height // 2 + 80)
    return r


class Renderer:
    """
    Draws a FlappyGame onto any pygame Surface. Read-only: the game is never
    touched. Clouds move with wall-clock time, so they drift in every state.
    """
    def __init__(self):
        if not pygame.font.get_init():
            pygame.font.init()
        self._fonts: Dict[int, pygame.font.Font] = {}
        self._sky: Optional[pygame.Surface] = None

    def _font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            font = pygame.font.SysFont(FONT_NAME, size, bold=True)
            self._fonts[size] = font
        return font

    # -------------------- Frame --------------------

    def draw(self, surf: pygame.Surface, game: FlappyGame, now_s: float):
        w, h = surf.get_width(), surf.get_height()
        if w <= 0 or h <= 0:
            return

        self._draw_sky(surf)
        self._draw_clouds(surf, now_s)
        self._draw_bird(surf, game)
        for pipe in game.pipes:
            upper, lower = pipe.rects(h, PIPE_WIDTH, PIPE_GAP)
            self._draw_pipe(surf, upper, is_top=True)
            self._draw_pipe(surf, lower, is_top=False)
        self._draw_hud(surf, game)

    # -------------------- Backdrop --------------------

    def _draw_sky(self, surf: pygame.Surface):
        size = surf.get_size()
        if self._sky is None or self._sky.get_size() != size:
            # vertical gradient, rebuilt only on resize
            self._sky = pygame.Surface(size)
            w, h = size
            for y in range(h):
                c = _lerp_color(COLOR_SKY_TOP, COLOR_SKY_BOTTOM, y / max(1, h - 1))
                pygame.draw.line(self._sky, c, (0, y), (w - 1, y))
        surf.blit(self._sky, (0, 0))

    def _draw_clouds(self, surf: pygame.Surface, now_s: float):
        w, h = surf.get_size()
        layer = pygame.Surface((w, h), pygame.SRCALPHA)
        for i in range(CLOUD_COUNT):
            x = ((now_s * CLOUD_SPEED + i * CLOUD_SPREAD_X) % (w + 100)) - 50
            y = CLOUD_BASE_Y + i * CLOUD_STEP_Y
            self._draw_cloud(layer, x, y)
        surf.blit(layer, (0, 0))

    @staticmethod
    def _draw_cloud(layer: pygame.Surface, x: float, y: float):
        for dx, dy, r in ((0, 0, 20), (15, -10, 15), (15, 10, 15), (30, 0, 20)):
            pygame.draw.circle(layer, COLOR_CLOUD, (int(x + dx), int(y + dy)), r)

    # -------------------- Actors --------------------

    def _draw_bird(self, surf: pygame.Surface, game: FlappyGame):
        bird = game.bird
        pad = 4
        sprite = pygame.Surface((bird.w + 2 * pad, bird.h + 2 * pad), pygame.SRCALPHA)
        cx, cy = sprite.get_width() // 2, sprite.get_height() // 2
        radius = bird.w // 2
        pygame.draw.circle(sprite, COLOR_BIRD, (cx, cy), radius)
        pygame.draw.circle(sprite, COLOR_OUTLINE, (cx, cy), radius, width=2)
        eye = (int(cx + bird.w * 0.2), int(cy - bird.h * 0.1))
        pygame.draw.circle(sprite, COLOR_OUTLINE, eye, 4)

        # positive angle = nose down; pygame rotates counter-clockwise
        angle = -math.degrees(bird.vy * BIRD_ROTATION_PER_VY)
        rotated = pygame.transform.rotate(sprite, angle)
        center = (int(bird.x + bird.w / 2), int(bird.y + bird.h / 2))
        surf.blit(rotated, rotated.get_rect(center=center))

    @staticmethod
    def _draw_pipe(surf: pygame.Surface, rect: pygame.Rect, is_top: bool):
        if rect.height <= 0:
            return
        # horizontal gradient body
        for i in range(rect.width):
            c = _lerp_color(COLOR_PIPE_LIGHT, COLOR_PIPE_DARK, i / max(1, rect.width - 1))
            pygame.draw.line(surf, c, (rect.left + i, rect.top), (rect.left + i, rect.bottom - 1))
        pygame.draw.rect(surf, COLOR_PIPE_DARK, rect, width=2)

        # lip at the gate side
        lip_y = rect.bottom - PIPE_LIP_H if is_top else rect.top
        lip = pygame.Rect(rect.left - PIPE_LIP_W // 2, lip_y, rect.width + PIPE_LIP_W, PIPE_LIP_H)
        pygame.draw.rect(surf, COLOR_PIPE_DARK, lip)

    # -------------------- Text layer --------------------

    def _blit_centered(self, surf: pygame.Surface, text: str, size: int, center, color=COLOR_FG):
        img = self._font(size).render(text, True, color)
        surf.blit(img, img.get_rect(center=center))

    def _draw_button(self, surf: pygame.Surface, rect: pygame.Rect, label: str):
        pygame.draw.rect(surf, COLOR_BUTTON, rect, border_radius=10)
        pygame.draw.rect(surf, COLOR_BUTTON_EDGE, rect, width=2, border_radius=10)
        self._blit_centered(surf, label, FONT_SIZE_TEXT, rect.center)

    def _draw_panel(self, surf: pygame.Surface):
        w, h = surf.get_size()
        panel = pygame.Surface((w, h), pygame.SRCALPHA)
        panel.fill(COLOR_PANEL)
        surf.blit(panel, (0, 0))

    def _draw_hud(self, surf: pygame.Surface, game: FlappyGame):
        w, h = surf.get_size()
        self._blit_centered(surf, str(game.score), FONT_SIZE_SCORE, (w // 2, 40))

        if game.state is GameState.IDLE:
            self._draw_panel(surf)
            self._blit_centered(surf, TITLE, FONT_SIZE_TITLE, (w // 2, h // 2 - 60))
            self._blit_centered(surf, f"Best: {game.high_score}", FONT_SIZE_TEXT, (w // 2, h // 2 - 20))
            self._draw_button(surf, start_button_rect(w, h), "Start")
        elif game.state is GameState.OVER:
            self._draw_panel(surf)
            self._blit_centered(surf, "Game Over", FONT_SIZE_TITLE, (w // 2, h // 2 - 70))
            self._blit_centered(surf, f"Score: {game.score}", FONT_SIZE_TEXT, (w // 2, h // 2 - 25))
            self._blit_centered(surf, f"Best: {game.high_score}", FONT_SIZE_TEXT, (w // 2, h // 2 + 10))
            self._draw_button(surf, restart_button_rect(w, h), "Restart")

        if game.state is not GameState.OVER:
            self._blit_centered(surf, "Click, tap or SPACE to flap", FONT_SIZE_TEXT,
                                (w // 2, h - 30), COLOR_HINT)
