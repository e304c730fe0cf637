"""Circle-approximation overlap test."""

from __future__ import annotations

from typing import Protocol

from .utils import Point, distance


class Collidable(Protocol):
    def center(self) -> Point: ...


def check_collision(a: Collidable, b: Collidable, size_a: float, size_b: float) -> bool:
    """Return whether two entities overlap.

    Each entity is treated as a circle of diameter ``size`` around its centre.
    Touching circles do not collide.
    """
    return distance(a.center(), b.center()) < size_a / 2 + size_b / 2
