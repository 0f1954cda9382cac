"""A text label drawn centred horizontally on a position."""

from __future__ import annotations

import logging
from typing import Any

import pygame

from .engine import Node, val

logger = logging.getLogger(__name__)


def text(font: Any, color: Any, content: Any, position: Any, visible: Any = True) -> Node:
    """A node rendering ``content`` with ``font``; every argument may be a prop."""
    node = Node()

    @node.render
    def on_render(surface: Any) -> None:
        if not val(visible):
            return
        message = val(content)
        if not message:
            return
        x, y = val(position)
        face = val(font)
        if face is None:
            logger.warning("Cannot render text %r: no font loaded", message)
            return
        try:
            rendered = face.render(message, False, val(color))
        except pygame.error as exc:
            logger.warning("Text rendering failed: %s", exc)
            return
        surface.blit(rendered, (x - rendered.get_width() / 2.0, y))

    return node