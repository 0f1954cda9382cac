"""Window, main loop and command-line entry point."""

from __future__ import annotations

import argparse
import logging
import time
from typing import Optional, Sequence

import pygame

from .engine import event_tree, render_tree, update_tree
from .game import game
from .settings import SKY_BLUE, WINDOW_HEIGHT, WINDOW_WIDTH

logger = logging.getLogger(__name__)

FONT_PATH = "assets/arial.ttf"
FONT_SIZE = 24
MAX_FRAME_TIME = 0.1


def clamp_frame_time(seconds: float) -> float:
    """Limit a frame's elapsed time so a stall does not make the game jump."""
    return min(seconds, MAX_FRAME_TIME)


def _load_font(path: str, size: int) -> Optional[pygame.font.Font]:
    try:
        return pygame.font.Font(path, size)
    except (OSError, pygame.error) as exc:
        logger.warning("Failed to load font '%s': %s. UI text will not appear.", path, exc)
        return None


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="flappy", description="Play a Flappy Bird demo.")
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Flappy Bird Demo")
        root = game(_load_font(FONT_PATH, FONT_SIZE))
        last = time.perf_counter()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                event_tree(root, event)
            now = time.perf_counter()
            dt = clamp_frame_time(now - last)
            last = now
            screen.fill(SKY_BLUE)
            update_tree(root, dt)
            render_tree(root, screen)
            pygame.display.flip()
            pygame.time.delay(1)
    except pygame.error as exc:
        logger.error("Display setup failed: %s", exc)
        return 1
    finally:
        pygame.quit()


if __name__ == "__main__":
    raise SystemExit(main())