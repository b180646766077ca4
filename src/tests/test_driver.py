# src/tests/test_driver.py
import pygame

from src.flappy.driver import FrameDriver, ManualScheduler, PygameScheduler
from src.flappy.game import GameState


def test_deltas_and_order():
    log = []
    sched = ManualScheduler(start_ms=1000.0)
    driver = FrameDriver(lambda dt: log.append(("update", dt)), lambda: log.append(("draw",)), sched)
    driver.start()
    assert log == []
    sched.advance(16.0, frames=3)
    assert log == [
        ("update", 0.0), ("draw",),
        ("update", 16.0), ("draw",),
        ("update", 16.0), ("draw",),
    ]
    assert driver.frames == 3
    assert sched.pending


def test_uneven_frames():
    deltas = []
    sched = ManualScheduler()
    FrameDriver(deltas.append, lambda: None, sched).start()
    sched.advance(10.0)
    sched.advance(25.0)
    sched.advance(5.0)
    assert deltas == [0.0, 10.0, 25.0]


def test_advance_without_start_does_nothing():
    sched = ManualScheduler()
    sched.advance(16.0, frames=5)
    assert not sched.pending


def test_draws_in_every_state(make_game):
    game = make_game()
    draws = []
    sched = ManualScheduler()
    FrameDriver(game.update, lambda: draws.append(game.state), sched).start()
    sched.advance(16.0, frames=3)
    game.on_trigger()
    sched.advance(16.0, frames=3)
    game.bird.y = -50.0
    sched.advance(16.0, frames=3)
    assert draws[:3] == [GameState.IDLE] * 3
    assert draws[3:6] == [GameState.RUNNING] * 3
    assert draws[6:] == [GameState.OVER] * 3


def test_trigger_between_frames_is_seen_by_next_update(make_game):
    game = make_game()
    sched = ManualScheduler()
    FrameDriver(game.update, lambda: None, sched).start()
    game.on_trigger()
    sched.advance(16.0)
    game.on_trigger()        # flap right after a frame
    assert game.bird.vy == -5.5
    sched.advance(16.0)
    assert game.bird.vy == -5.25


def test_pygame_scheduler_runs_until_stopped():
    pygame.display.init()
    try:
        events = []
        sched = PygameScheduler(fps=1000, on_event=events.append)
        frames = []

        def draw():
            frames.append(1)
            if len(frames) == 3:
                sched.stop()

        pygame.event.post(pygame.event.Event(pygame.USEREVENT, tag="ping"))
        FrameDriver(lambda dt: None, draw, sched).start()
        sched.run()
        assert len(frames) == 3
        assert any(e.type == pygame.USEREVENT for e in events)
    finally:
        pygame.display.quit()


def test_pygame_scheduler_stops_on_quit():
    pygame.display.init()
    try:
        sched = PygameScheduler(fps=1000, on_event=lambda e: None)
        frames = []
        FrameDriver(lambda dt: None, lambda: frames.append(1), sched).start()
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        sched.run()
        assert frames == []
    finally:
        pygame.display.quit()
