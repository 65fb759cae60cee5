"""
Space Impact window and main loop.

How to run:
  pip install -e .
  python -m spaceimpact

Controls: 1/2 pick Level or Endless mode in the menu, arrows move, R restarts,
M returns to the menu, F1 logs a debug line, Esc quits.
"""
from __future__ import annotations

import logging
import random
from typing import Optional

import pygame

from .game import GameController
from .render import Renderer
from .settings import FPS, HEIGHT, LOG_LEVEL, MODE_ENDLESS, MODE_LEVEL, SCALE, TITLE, WIDTH

logger = logging.getLogger(__name__)

MODE_KEYS = {
    pygame.K_1: MODE_LEVEL,
    pygame.K_KP1: MODE_LEVEL,
    pygame.K_2: MODE_ENDLESS,
    pygame.K_KP2: MODE_ENDLESS,
}
DIRECTION_KEYS = {
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
}


def setup_logging(level: str = LOG_LEVEL):
    # getLevelName maps known names to ints and anything else to a string
    level_no = logging.getLevelName(level.upper())
    valid = isinstance(level_no, int)
    logging.basicConfig(
        level=level_no if valid else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not valid:
        logger.warning("Ignoring SPACEIMPACT_LOG_LEVEL=%r: not a logging level", level)


class App:
    def __init__(self, controller: Optional[GameController] = None, scale: int = SCALE):
        pygame.init()
        pygame.display.set_caption(TITLE)
        self.scale = scale
        self.screen = pygame.display.set_mode((WIDTH * scale, HEIGHT * scale))
        self.canvas = pygame.Surface((WIDTH, HEIGHT))
        self.clock = pygame.time.Clock()
        self.controller = controller or GameController(rng=random.Random())
        self.renderer = Renderer(self.canvas)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Apply one event. Returns False when the app should quit."""
        c = self.controller
        now = pygame.time.get_ticks()
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            if event.key in DIRECTION_KEYS:
                c.set_key(DIRECTION_KEYS[event.key], True)
            elif event.key in MODE_KEYS:
                c.select_mode(MODE_KEYS[event.key], now)
            elif event.key == pygame.K_r:
                c.restart(now)
            elif event.key == pygame.K_m:
                c.go_to_menu()
            elif event.key == pygame.K_F1:
                logger.info(c.describe())
        elif event.type == pygame.KEYUP and event.key in DIRECTION_KEYS:
            c.set_key(DIRECTION_KEYS[event.key], False)
        return True

    def run(self):
        running = True
        while running:
            self.clock.tick(FPS)
            for event in pygame.event.get():
                if not self.handle_event(event):
                    running = False
                    break
            self.controller.update(pygame.time.get_ticks())
            self.renderer.draw(self.controller.snapshot())
            pygame.transform.scale(self.canvas, self.screen.get_size(), self.screen)
            pygame.display.flip()
        pygame.quit()


def main():
    setup_logging()
    App().run()


if __name__ == "__main__":
    main()
