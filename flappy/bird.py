"""The player's bird."""

from __future__ import annotations

from typing import Any

import pygame

from .engine import Node, State
from .settings import (
    BIRD_COLOR,
    BIRD_HEIGHT,
    BIRD_WIDTH,
    BIRD_X_POSITION,
    FLAP_VELOCITY,
    GRAVITY,
    INITIAL_BIRD_RECT,
    WINDOW_HEIGHT,
    GameStatus,
    Rect,
    is_flap_event,
)


def _rect_at(y: float) -> Rect:
    return Rect(BIRD_X_POSITION - BIRD_WIDTH / 2, y - BIRD_HEIGHT / 2, BIRD_WIDTH, BIRD_HEIGHT)


def bird(game_status: State[GameStatus], bird_rect: State[Rect]) -> Node:
    """A bird that falls under gravity, flaps on key presses and dies off-screen."""
    node = Node()
    y_pos = node.state(WINDOW_HEIGHT / 2.0)
    y_vel = node.state(0.0)
    rotation = node.state(0.0)

    @node.event
    def on_event(event: Any) -> None:
        if is_flap_event(event) and game_status.get() is GameStatus.PLAYING:
            y_vel.set(FLAP_VELOCITY)

    def reset() -> None:
        if game_status.get() in (GameStatus.MAIN_MENU, GameStatus.GAME_OVER):
            y_pos.set(WINDOW_HEIGHT / 2.0)
            y_vel.set(0.0)
            rotation.set(0.0)
            bird_rect.set(INITIAL_BIRD_RECT)

    node.effect(reset, game_status)

    @node.update
    def on_update(dt: float) -> None:
        if game_status.get() is not GameStatus.PLAYING:
            return
        vel = y_vel.get() + GRAVITY * dt
        pos = y_pos.get() + vel * dt
        y_pos.set(pos)
        y_vel.set(vel)
        rotation.set(max(-30.0, min(30.0, vel * 0.05)))
        bird_rect.set(_rect_at(pos))
        if pos + BIRD_HEIGHT / 2 > WINDOW_HEIGHT or pos - BIRD_HEIGHT / 2 < 0:
            game_status.set(GameStatus.GAME_OVER)

    @node.render
    def on_render(surface: Any) -> None:
        r = _rect_at(y_pos.get())
        pygame.draw.rect(surface, BIRD_COLOR, (r.x, r.y, r.w, r.h))

    return node