"""Game constants, the game status, rectangles and input helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

import pygame

WINDOW_WIDTH = 384
WINDOW_HEIGHT = 600

GRAVITY = 1200.0
FLAP_VELOCITY = -400.0
BIRD_X_POSITION = WINDOW_WIDTH / 4.0
BIRD_WIDTH = 34.0
BIRD_HEIGHT = 24.0

PIPE_WIDTH = 70.0
PIPE_GAP_HEIGHT = 150.0
PIPE_SPEED = 150.0
PIPE_SPAWN_INTERVAL = 2.0
MIN_PIPE_HEIGHT = 80
MAX_PIPE_HEIGHT_OFFSET = int(WINDOW_HEIGHT - PIPE_GAP_HEIGHT - MIN_PIPE_HEIGHT * 2)

SKY_BLUE = (135, 206, 235)
BIRD_COLOR = (255, 255, 0)
PIPE_COLOR = (0, 255, 0)
TEXT_COLOR = (0, 0, 0, 255)


class GameStatus(Enum):
    """The phase the game is in."""

    MAIN_MENU = auto()
    PLAYING = auto()
    GAME_OVER = auto()


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle with float coordinates."""

    x: float
    y: float
    w: float
    h: float

    def _is_empty(self) -> bool:
        return self.w < 0.0 or self.h < 0.0

    def intersects(self, other: Rect) -> bool:
        """Whether the two rectangles overlap; empty rectangles never do."""
        if self._is_empty() or other._is_empty():
            return False
        low = max(self.x, other.x)
        high = min(self.x + self.w, other.x + other.w)
        if high < low:
            return False
        low = max(self.y, other.y)
        high = min(self.y + self.h, other.y + other.h)
        return not high < low


INITIAL_BIRD_RECT = Rect(
    BIRD_X_POSITION - BIRD_WIDTH / 2,
    WINDOW_HEIGHT / 2.0 - BIRD_HEIGHT / 2,
    BIRD_WIDTH,
    BIRD_HEIGHT,
)


def is_flap_event(event: Any) -> bool:
    """Whether ``event`` is a press of the space bar or the up arrow."""
    if getattr(event, "type", None) != pygame.KEYDOWN:
        return False
    return getattr(event, "key", None) in (pygame.K_SPACE, pygame.K_UP)