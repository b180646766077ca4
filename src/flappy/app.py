# src/flappy/app.py
import argparse
import logging
import sys
import time

import pygame
from pygame import K_ESCAPE

from .config import WIDTH, HEIGHT, FPS, MIN_WIDTH, MIN_HEIGHT, TITLE
from .driver import FrameDriver, PygameScheduler
from .game import FlappyGame
from .input import InputDispatcher
from .pipes import PipeGen
from .render import Renderer, start_button_rect, restart_button_rect
from .score_store import JsonScoreStore

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    p = argparse.ArgumentParser(description=TITLE)
    p.add_argument("--width", type=int, default=WIDTH, help="Initial window width (px)")
    p.add_argument("--height", type=int, default=HEIGHT, help="Initial window height (px)")
    p.add_argument("--fps", type=int, default=FPS, help="Frame rate cap")
    p.add_argument("--seed", type=int, default=None,
                   help="Pipe seed. Omit for a random layout each launch.")
    p.add_argument("--score-file", default=None,
                   help="High score JSON file (default: $FLAPPY_SCORE_FILE or ~/.flappy_gate/highscore.json)")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = p.parse_args(argv)
    if args.width < MIN_WIDTH or args.height < MIN_HEIGHT:
        p.error(f"window must be at least {MIN_WIDTH}x{MIN_HEIGHT}")
    if args.fps <= 0:
        p.error("--fps must be positive")
    return args


def clamp_size(width: int, height: int):
    """Keep the window large enough for pipe generation."""
    return max(MIN_WIDTH, width), max(MIN_HEIGHT, height)


def run(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    pygame.init()
    pygame.display.set_caption(TITLE)
    screen = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)

    store = JsonScoreStore(args.score_file)
    game = FlappyGame(store, args.width, args.height, PipeGen(args.seed))
    renderer = Renderer()
    dispatcher = InputDispatcher(game, start_button_rect, restart_button_rect)
    logger.info("pipe seed %s, score file %s", game.pipe_gen.seed, store.path)

    def on_event(event):
        nonlocal screen
        if event.type == pygame.VIDEORESIZE:
            w, h = clamp_size(event.w, event.h)
            screen = pygame.display.set_mode((w, h), pygame.RESIZABLE)
            game.resize(w, h)
            return
        if event.type == pygame.KEYDOWN and event.key == K_ESCAPE:
            scheduler.stop()
            return
        dispatcher.handle_event(event)

    def draw():
        renderer.draw(screen, game, time.monotonic())
        pygame.display.flip()

    scheduler = PygameScheduler(args.fps, on_event)
    driver = FrameDriver(game.update, draw, scheduler)
    driver.start()
    try:
        scheduler.run()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(run())
