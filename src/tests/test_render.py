# src/tests/test_render.py
"""Renderer smoke tests on off-screen surfaces (no window)."""
import pygame
import pytest

from src.flappy.game import GameState
from src.flappy.pipes import Pipe
from src.flappy.render import Renderer, start_button_rect, restart_button_rect


@pytest.fixture(scope="module")
def renderer():
    return Renderer()


def snapshot(game):
    return (game.state, game.score, game.high_score, game.bird.y, game.bird.vy,
            [(p.x, p.top, p.passed) for p in game.pipes])


def test_draw_each_state_without_mutation(renderer, make_game):
    game = make_game(width=480, height=640)
    surf = pygame.Surface((480, 640))

    before = snapshot(game)
    renderer.draw(surf, game, 0.0)
    assert snapshot(game) == before

    game.on_trigger()
    game.pipes = [Pipe(x=200.0, top=150.0), Pipe(x=-30.0, top=300.0, passed=True), Pipe(x=470.0, top=80.0)]
    game.bird.vy = 7.0
    before = snapshot(game)
    renderer.draw(surf, game, 1.5)
    assert snapshot(game) == before

    game.bird.y = -100.0
    game.update(16.0)
    assert game.state is GameState.OVER
    before = snapshot(game)
    renderer.draw(surf, game, 3.0)
    assert snapshot(game) == before


def test_zero_size_surface(renderer, make_game):
    game = make_game()
    game.on_trigger()
    game.pipes = [Pipe(x=100.0, top=100.0)]
    renderer.draw(pygame.Surface((0, 0)), game, 0.0)
    renderer.draw(pygame.Surface((0, 50)), game, 0.0)


def test_empty_pipes(renderer, make_game):
    game = make_game()
    game.on_trigger()
    assert game.pipes == []
    renderer.draw(pygame.Surface((800, 600)), game, 0.0)


def test_pipe_is_drawn(renderer, make_game):
    game = make_game(width=480, height=640)
    game.on_trigger()
    game.pipes = [Pipe(x=300.0, top=300.0)]
    surf = pygame.Surface((480, 640))
    renderer.draw(surf, game, 0.0)
    # inside the upper segment, away from text and lip
    r, g, b, *_ = surf.get_at((330, 200))
    assert g > r and g > b


def test_clouds_drift_in_idle(renderer, make_game):
    game = make_game(width=480, height=640)
    a, b = pygame.Surface((480, 640)), pygame.Surface((480, 640))
    renderer.draw(a, game, 0.0)
    renderer.draw(b, game, 4.0)
    assert pygame.image.tostring(a, "RGB") != pygame.image.tostring(b, "RGB")


def test_resize_between_frames(renderer, make_game):
    game = make_game()
    renderer.draw(pygame.Surface((800, 600)), game, 0.0)
    renderer.draw(pygame.Surface((400, 700)), game, 0.0)


def test_buttons_are_centered():
    s = start_button_rect(480, 640)
    r = restart_button_rect(480, 640)
    assert s.centerx == r.centerx == 240
    assert s.centery > 320 and r.centery > s.centery
