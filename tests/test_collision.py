import pytest

from slipfloor.collision import BoundingCircle, is_circle_colliding, resolve_overlap
from slipfloor.gamemath import Vector2D, length


def test_separate_circles_do_not_collide():
    a = BoundingCircle(Vector2D(0.0, 0.0), 16.0)
    b = BoundingCircle(Vector2D(100.0, 0.0), 16.0)
    assert is_circle_colliding(a, b) is False


def test_touching_circles_collide():
    a = BoundingCircle(Vector2D(0.0, 0.0), 16.0)
    b = BoundingCircle(Vector2D(32.0, 0.0), 16.0)
    assert is_circle_colliding(a, b) is True


def test_collision_is_symmetric():
    a = BoundingCircle(Vector2D(3.0, 4.0), 5.0)
    b = BoundingCircle(Vector2D(10.0, 9.0), 4.0)
    assert is_circle_colliding(a, b) == is_circle_colliding(b, a)


def test_resolve_overlap_leaves_circles_touching():
    a = BoundingCircle(Vector2D(100.0, 100.0), 16.0)
    b = BoundingCircle(Vector2D(110.0, 105.0), 16.0)
    resolve_overlap(a, b)
    assert length(b.center - a.center) == pytest.approx(a.radius + b.radius)
    assert is_circle_colliding(a, b)


def test_resolve_overlap_keeps_midpoint():
    a = BoundingCircle(Vector2D(100.0, 100.0), 16.0)
    b = BoundingCircle(Vector2D(110.0, 105.0), 16.0)
    mid_before = (a.center + b.center) / 2.0
    resolve_overlap(a, b)
    mid_after = (a.center + b.center) / 2.0
    assert mid_after.x == pytest.approx(mid_before.x)
    assert mid_after.y == pytest.approx(mid_before.y)


def test_resolve_overlap_ignores_separate_circles():
    a = BoundingCircle(Vector2D(0.0, 0.0), 16.0)
    b = BoundingCircle(Vector2D(50.0, 0.0), 16.0)
    resolve_overlap(a, b)
    assert a.center == Vector2D(0.0, 0.0)
    assert b.center == Vector2D(50.0, 0.0)


def test_resolve_overlap_with_same_center_leaves_positions():
    a = BoundingCircle(Vector2D(5.0, 5.0), 16.0)
    b = BoundingCircle(Vector2D(5.0, 5.0), 16.0)
    resolve_overlap(a, b)
    assert a.center == Vector2D(5.0, 5.0)
    assert b.center == Vector2D(5.0, 5.0)