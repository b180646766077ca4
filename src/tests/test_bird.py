# src/tests/test_bird.py
"""Bird physics: fixed per-frame integration and boundary checks."""
from src.flappy.bird import Bird
from src.flappy.config import BIRD_X, BIRD_START_Y, JUMP_FORCE, GRAVITY


def test_defaults():
    bird = Bird()
    assert bird.x == BIRD_X == 80
    assert bird.y == BIRD_START_Y == 200
    assert bird.vy == 0.0
    assert (bird.w, bird.h) == (35, 35)


def test_flap_then_step_matches_reference_numbers():
    bird = Bird(y=200.0, vy=0.0)
    bird.flap()
    assert bird.vy == -5.5 == JUMP_FORCE
    bird.update_physics(16.7)
    assert bird.vy == -5.25
    assert bird.y == 194.75


def test_gravity_from_rest():
    bird = Bird(y=200.0, vy=0.0)
    bird.update_physics(16.7)
    assert bird.vy == GRAVITY
    assert bird.y == 200.25


def test_step_ignores_delta():
    a, b = Bird(), Bird()
    for _ in range(10):
        a.update_physics(1.0)
        b.update_physics(100.0)
    assert (a.y, a.vy) == (b.y, b.vy)


def test_flap_sets_velocity_instead_of_adding():
    bird = Bird(vy=-4.0)
    bird.flap()
    bird.flap()
    assert bird.vy == JUMP_FORCE


def test_out_of_bounds():
    bird = Bird()
    bird.y = -0.5
    assert bird.out_of_bounds(600)
    bird.y = 0.0
    assert not bird.out_of_bounds(600)
    bird.y = 600 - 35
    assert not bird.out_of_bounds(600)
    bird.y = 600 - 34.9
    assert bird.out_of_bounds(600)


def test_reset_restores_start():
    bird = Bird()
    bird.y, bird.vy = 17.0, 9.0
    bird.reset()
    assert (bird.y, bird.vy) == (200.0, 0.0)


def test_rect_follows_position():
    bird = Bird(y=123.9)
    r = bird.rect
    assert (r.x, r.y, r.w, r.h) == (80, 123, 35, 35)
