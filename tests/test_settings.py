import pygame
import pytest

from flappy.settings import Rect, is_flap_event


def test_overlapping_rects_intersect():
    assert Rect(0, 0, 10, 10).intersects(Rect(5, 5, 10, 10))


def test_disjoint_rects_do_not_intersect():
    assert not Rect(0, 0, 10, 10).intersects(Rect(20, 20, 5, 5))


def test_intersection_is_symmetric():
    a = Rect(0, 0, 10, 10)
    b = Rect(8, -3, 4, 4)
    assert a.intersects(b) == b.intersects(a)
    assert a.intersects(b)


def test_contained_rect_intersects():
    assert Rect(0, 0, 100, 100).intersects(Rect(40, 40, 1, 1))


def test_separated_on_one_axis_only():
    assert not Rect(0, 0, 10, 10).intersects(Rect(5, 30, 10, 10))
    assert not Rect(0, 0, 10, 10).intersects(Rect(30, 5, 10, 10))


def test_empty_rect_never_intersects():
    assert not Rect(0, 0, -1, 10).intersects(Rect(0, 0, 10, 10))
    assert not Rect(0, 0, 10, 10).intersects(Rect(0, 0, 10, -2))


def test_rect_equality_by_value():
    assert Rect(1, 2, 3, 4) == Rect(1, 2, 3, 4)
    assert Rect(1, 2, 3, 4) != Rect(1, 2, 3, 5)


@pytest.mark.parametrize("key", [pygame.K_SPACE, pygame.K_UP])
def test_flap_keys(key):
    assert is_flap_event(pygame.event.Event(pygame.KEYDOWN, key=key))


def test_other_key_is_not_flap():
    assert not is_flap_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a))


def test_key_release_is_not_flap():
    assert not is_flap_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_SPACE))


def test_quit_is_not_flap():
    assert not is_flap_event(pygame.event.Event(pygame.QUIT))