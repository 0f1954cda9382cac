"""Pipe pairs and the manager that spawns, moves and scores them."""

from __future__ import annotations

import random
from collections import deque
from dataclasses import dataclass, replace
from typing import Any, Optional

import pygame

from .engine import Node, State, val
from .settings import (
    MAX_PIPE_HEIGHT_OFFSET,
    MIN_PIPE_HEIGHT,
    PIPE_COLOR,
    PIPE_GAP_HEIGHT,
    PIPE_SPAWN_INTERVAL,
    PIPE_SPEED,
    PIPE_WIDTH,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    GameStatus,
    Rect,
)


@dataclass(frozen=True)
class PipeData:
    """Position and geometry of one pipe pair."""

    x: float
    top_height: float
    top_rect: Rect
    bottom_rect: Rect
    scored: bool = False


def pipe_pair(initial_x: float, top_opening_y: float) -> Node:
    """A node drawing a top and a bottom pipe around a gap."""
    node = Node()
    bottom_y = top_opening_y + PIPE_GAP_HEIGHT
    data = node.state(
        PipeData(
            x=initial_x,
            top_height=top_opening_y,
            top_rect=Rect(initial_x, 0.0, PIPE_WIDTH, top_opening_y),
            bottom_rect=Rect(initial_x, bottom_y, PIPE_WIDTH, WINDOW_HEIGHT - bottom_y),
        )
    )

    @node.render
    def on_render(surface: Any) -> None:
        current = data.get()
        for r in (current.top_rect, current.bottom_rect):
            pygame.draw.rect(surface, PIPE_COLOR, (r.x, r.y, r.w, r.h))

    return node


def pipes(
    game_status: State[GameStatus],
    bird_rect: Any,
    score: State[int],
    rng: Optional[random.Random] = None,
) -> Node:
    """Spawn pipes while playing, move them, detect collisions and count score."""
    rng = rng if rng is not None else random.Random()
    node = Node()
    active: State[deque[Node]] = node.state(deque())
    spawn_timer = PIPE_SPAWN_INTERVAL

    def clear_when_idle() -> None:
        if game_status.get() is not GameStatus.PLAYING:
            queue = active.get()
            if queue:
                queue.clear()
                node.set_children([])

    node.effect(clear_when_idle, game_status)

    @node.update
    def on_update(dt: float) -> None:
        nonlocal spawn_timer
        if game_status.get() is not GameStatus.PLAYING:
            return

        spawn_timer -= dt
        queue = active.get()
        if spawn_timer <= 0:
            opening = float(MIN_PIPE_HEIGHT + rng.randint(0, MAX_PIPE_HEIGHT_OFFSET))
            new_pipe = pipe_pair(WINDOW_WIDTH + PIPE_WIDTH / 2, opening)
            queue.append(new_pipe)
            node.add_child(new_pipe)
            spawn_timer = PIPE_SPAWN_INTERVAL

        bird_box = val(bird_rect)
        for pipe in queue:
            slot = pipe.find_state(PipeData)
            if slot is None:
                continue
            data = slot.get()
            x = data.x - PIPE_SPEED * dt
            left = x - PIPE_WIDTH / 2
            data = replace(
                data,
                x=x,
                top_rect=replace(data.top_rect, x=left),
                bottom_rect=replace(data.bottom_rect, x=left),
            )
            if bird_box.intersects(data.top_rect) or bird_box.intersects(data.bottom_rect):
                game_status.set(GameStatus.GAME_OVER)
            if not data.scored and data.x < bird_box.x:
                data = replace(data, scored=True)
                score.set(score.get() + 1)
            slot.set(data)

        if queue:
            first = queue[0]
            slot = first.find_state(PipeData)
            if slot is not None and slot.get().x < -PIPE_WIDTH:
                queue.popleft()
                node.children = [c for c in node.children if c is not first]

    return node