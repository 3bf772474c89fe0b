"""Circle collision tests and overlap resolution."""

from __future__ import annotations

from dataclasses import dataclass

from slipfloor.gamemath import Vector2D, length, normalize


@dataclass
class BoundingCircle:
    """A circle used for collision checks."""

    center: Vector2D
    radius: float


def is_circle_colliding(a: BoundingCircle, b: BoundingCircle) -> bool:
    """Whether two circles touch or overlap."""
    return length(a.center - b.center) <= a.radius + b.radius


def resolve_overlap(a: BoundingCircle, b: BoundingCircle) -> None:
    """Push two overlapping circles apart equally so they just touch."""
    delta = b.center - a.center
    overlap = (a.radius + b.radius) - length(delta)
    if overlap > 0.0:
        correction = normalize(delta) * (overlap / 2.0)
        a.center = a.center - correction
        b.center = b.center + correction