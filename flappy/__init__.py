"""A Flappy Bird game on a hook-based scene graph, rendered with pygame."""

__version__ = "1.0.0"