"""
2D point / vector type.

Provides the ``Point`` value used for rectangle corners, centers, sizes and
margins.  Arithmetic is written with operators::

    from enclave.types import Point

    p = Point(3.0, 4.0)
    p + Point(1.0, 1.0)   # Point(x=4.0, y=5.0)
    p * 2.0               # Point(x=6.0, y=8.0)
    p.norm()              # 5.0
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass

__all__ = ["Point"]


@dataclass(frozen=True)
class Point:
    """A location or displacement in the (x, y) plane."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_tuple(cls, xy: tuple[float, float]) -> Point:
        """Create a point from an ``(x, y)`` pair."""
        x, y = xy
        return cls(float(x), float(y))

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def __add__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: object) -> Point:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Point(scalar * self.x, scalar * self.y)

    def __rmul__(self, scalar: object) -> Point:
        return self.__mul__(scalar)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def ortho(self) -> Point:
        """Counter-clockwise orthogonal vector with the same norm."""
        return Point(-self.y, self.x)

    def dot(self, other: Point) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: Point) -> float:
        """2D cross product (scalar z-component)."""
        return self.x * other.y - self.y * other.x

    def norm(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def normalize(self) -> Point:
        """Unit vector in the same direction.

        The zero vector is returned unchanged.
        """
        if self.x == 0 and self.y == 0:
            return self
        return self * (1.0 / self.norm())
