import random

import pygame

from flappy.engine import Node, render_tree, update_tree
from flappy.pipes import PipeData, pipe_pair, pipes
from flappy.settings import (
    MAX_PIPE_HEIGHT_OFFSET,
    MIN_PIPE_HEIGHT,
    PIPE_COLOR,
    PIPE_GAP_HEIGHT,
    PIPE_WIDTH,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    GameStatus,
    Rect,
)


def _data(pipe):
    return pipe.find_state(PipeData).get()


def _manager(bird_box, seed=1):
    holder = Node()
    status = holder.state(GameStatus.PLAYING)
    score = holder.state(0)
    rect = holder.state(bird_box)
    node = pipes(status, rect, score, random.Random(seed))
    return status, score, node


def test_pipe_pair_geometry():
    data = _data(pipe_pair(100.0, 200.0))
    assert data.top_rect == Rect(100.0, 0.0, PIPE_WIDTH, 200.0)
    assert data.bottom_rect.y == 200.0 + PIPE_GAP_HEIGHT
    assert data.bottom_rect.y + data.bottom_rect.h == WINDOW_HEIGHT
    assert not data.scored


def test_pipe_pair_renders_green_around_gap():
    surface = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))
    surface.fill((0, 0, 0))
    render_tree(pipe_pair(100.0, 200.0), surface)
    assert surface.get_at((110, 50)) == pygame.Color(*PIPE_COLOR)
    assert surface.get_at((110, 275)) == pygame.Color(0, 0, 0)
    assert surface.get_at((110, 500)) == pygame.Color(*PIPE_COLOR)


def test_pipe_spawns_after_interval():
    status, score, node = _manager(Rect(0, 700, 10, 10))
    update_tree(node, 1.0)
    assert node.children == []
    update_tree(node, 1.0)
    assert len(node.children) == 1
    data = _data(node.children[0])
    assert data.x < WINDOW_WIDTH + PIPE_WIDTH / 2
    assert data.top_rect.x == data.x - PIPE_WIDTH / 2
    assert data.bottom_rect.x == data.top_rect.x
    assert MIN_PIPE_HEIGHT <= data.top_height <= MIN_PIPE_HEIGHT + MAX_PIPE_HEIGHT_OFFSET
    assert data.bottom_rect.y + data.bottom_rect.h == WINDOW_HEIGHT


def test_same_seed_gives_same_pipes():
    heights = []
    for _ in range(2):
        _, _, node = _manager(Rect(0, 700, 10, 10), seed=7)
        update_tree(node, 2.0)
        heights.append(_data(node.children[0]).top_height)
    assert heights[0] == heights[1]


def test_collision_ends_game():
    status, score, node = _manager(Rect(250, 0, 34, WINDOW_HEIGHT))
    update_tree(node, 1.0)
    update_tree(node, 1.0)
    assert status.get() is GameStatus.GAME_OVER


def test_passing_pipe_scores_once():
    status, score, node = _manager(Rect(300, 700, 10, 10))
    update_tree(node, 1.0)
    update_tree(node, 1.0)
    assert score.get() == 1
    assert _data(node.children[0]).scored
    update_tree(node, 1.0)
    assert score.get() == 1
    assert status.get() is GameStatus.PLAYING


def test_pipes_cleared_when_not_playing():
    status, score, node = _manager(Rect(0, 700, 10, 10))
    update_tree(node, 2.0)
    assert len(node.children) == 1
    status.set(GameStatus.GAME_OVER)
    update_tree(node, 2.0)
    assert node.children == []


def test_no_spawn_outside_play():
    status, score, node = _manager(Rect(0, 700, 10, 10))
    status.set(GameStatus.MAIN_MENU)
    for _ in range(5):
        update_tree(node, 2.0)
    assert node.children == []
    assert score.get() == 0


def test_offscreen_pipes_are_removed():
    status, score, node = _manager(Rect(0, 700, 10, 10))
    for _ in range(40):
        update_tree(node, 0.5)
    assert 1 <= len(node.children) <= 3
    assert all(_data(p).x >= -PIPE_WIDTH - 100 for p in node.children)
    assert score.get() >= 1