"""Simple types for plane geometry."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Point:
    """A point in the plane."""

    x: float
    y: float

    def distance(self, q: Point) -> float:
        """Return the straight-line distance from this point to q."""
        return math.hypot(q.x - self.x, q.y - self.y)

    def scale_by(self, factor: float) -> None:
        """Scale both coordinates by factor, in place."""
        self.x *= factor
        self.y *= factor


def distance(p: Point, q: Point) -> float:
    """Return the straight-line distance between p and q."""
    return math.hypot(q.x - p.x, q.y - p.y)


class Path(list):
    """A journey connecting points with straight lines."""

    def distance(self) -> float:
        """Return the distance travelled along the path."""
        return sum(a.distance(b) for a, b in zip(self, self[1:]))


@dataclass
class ColoredPoint(Point):
    """A point carrying an RGBA colour."""

    color: tuple[int, int, int, int]