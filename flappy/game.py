"""The game root: status, score and the screens shown for each phase."""

from __future__ import annotations

from typing import Any

from .bird import bird
from .engine import Node, conditional, fragment
from .pipes import pipes
from .settings import INITIAL_BIRD_RECT, TEXT_COLOR, WINDOW_WIDTH, GameStatus, is_flap_event
from .text import text


def game(font: Any) -> Node:
    """Build the whole scene graph for one game using ``font`` for labels."""
    node = Node()
    status = node.state(GameStatus.MAIN_MENU)
    score = node.state(0)
    bird_rect = node.state(INITIAL_BIRD_RECT)

    @node.event
    def on_event(event: Any) -> None:
        if not is_flap_event(event):
            return
        current = status.get()
        if current is GameStatus.MAIN_MENU:
            status.set(GameStatus.PLAYING)
            score.set(0)
        elif current is GameStatus.GAME_OVER:
            status.set(GameStatus.MAIN_MENU)
            score.set(0)

    def when(predicate):
        return node.derived(lambda: predicate(status.get()), status)

    centre = WINDOW_WIDTH / 2.0
    node.set_children(
        [
            conditional(
                when(lambda s: s is not GameStatus.GAME_OVER),
                fragment(pipes(status, bird_rect, score), bird(status, bird_rect)),
            ),
            conditional(
                when(lambda s: s is GameStatus.MAIN_MENU),
                text(font, TEXT_COLOR, "Press Space to Flap", (centre, 100.0)),
            ),
            conditional(
                when(lambda s: s is GameStatus.GAME_OVER),
                fragment(
                    text(font, TEXT_COLOR, "Game Over", (centre, 100.0)),
                    text(font, TEXT_COLOR, "Press Space to Restart", (centre, 150.0)),
                ),
            ),
            conditional(
                when(lambda s: s is GameStatus.PLAYING),
                text(
                    font,
                    TEXT_COLOR,
                    node.derived(lambda: f"Score: {score.get()}", score),
                    (centre, 50.0),
                ),
            ),
        ]
    )
    return node