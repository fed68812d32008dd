"""Closed axis-aligned rectangle type.

A ``Rect`` is the product of two ``Interval`` values, one per axis.  Every
operation is computed per axis on the intervals and recombined, so the
interval conventions carry over unchanged: empty is a value, the empty
rectangle is contained in every rectangle, and the size of an empty
rectangle is negative.

A rectangle is *valid* when its x interval is empty exactly when its y
interval is empty.  ``expanded`` and ``intersection`` are the operations that
can empty a single axis; they return the canonical ``Rect.empty()`` instead.

Note that ``Rect()`` is the degenerate point rectangle at the origin, which
is not empty.  Test for emptiness with ``is_empty`` rather than comparing
against a particular value.

Example::

    from enclave.types import Point, Rect

    outer = Rect.from_points([Point(1, 2), Point(5, 7)])
    inner = Rect.from_center_size(Point(2.5, 5), Point(1, 2))

    outer.contains(inner)          # True
    inner.contains(outer)          # False
    outer.contains(Rect.empty())   # True
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .interval import EPSILON, Interval
from .point import Point

__all__ = ["Rect"]


@dataclass(frozen=True)
class Rect:
    """A closed rectangle ``x x y`` in the (x, y) plane.

    Attributes:
        x: Extent along the x axis.
        y: Extent along the y axis.
    """

    x: Interval = field(default_factory=Interval)
    y: Interval = field(default_factory=Interval)

    # ------------------------------------------------------------------
    # Factory methods
    # ------------------------------------------------------------------

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> Rect:
        """Create the smallest rectangle containing all *points*.

        Returns ``Rect()`` when *points* is empty.  The rectangle is seeded
        from the first point exactly so that the origin does not leak into
        the bounds.
        """
        it = iter(points)
        first = next(it, None)
        if first is None:
            return cls()

        rect = cls(Interval.from_point(first.x), Interval.from_point(first.y))
        for p in it:
            rect = rect.add_point(p)
        return rect

    @classmethod
    def from_array(cls, points: ArrayLike) -> Rect:
        """Create the bounding rectangle of an ``(N, 2)`` array of points.

        Same result as ``from_points``; an empty array gives ``Rect()``.

        Raises:
            ValueError: If a non-empty array does not have shape ``(N, 2)``.
        """
        arr = np.asarray(points, dtype=float)
        if arr.size == 0:
            return cls()
        if arr.ndim != 2 or arr.shape[1] != 2:
            msg = f"Expected an array of shape (N, 2), got {arr.shape}"
            raise ValueError(msg)

        lo = arr.min(axis=0)
        hi = arr.max(axis=0)
        return cls(Interval(float(lo[0]), float(hi[0])), Interval(float(lo[1]), float(hi[1])))

    @classmethod
    def from_center_size(cls, center: Point, size: Point) -> Rect:
        """Create a rectangle from its center and size.

        Both dimensions of *size* must be non-negative.
        """
        return cls(
            Interval(center.x - size.x / 2, center.x + size.x / 2),
            Interval(center.y - size.y / 2, center.y + size.y / 2),
        )

    @classmethod
    def empty(cls) -> Rect:
        """Return the canonical empty rectangle."""
        return cls(Interval.empty(), Interval.empty())

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def is_valid(self) -> bool:
        """True if the x interval is empty exactly when the y interval is."""
        return self.x.is_empty == self.y.is_empty

    @property
    def is_empty(self) -> bool:
        return self.x.is_empty

    @property
    def lo(self) -> Point:
        """Lower-left corner."""
        return Point(self.x.lo, self.y.lo)

    @property
    def hi(self) -> Point:
        """Upper-right corner."""
        return Point(self.x.hi, self.y.hi)

    @property
    def center(self) -> Point:
        return Point(self.x.center, self.y.center)

    @property
    def size(self) -> Point:
        """Width and height.  Both are negative for an empty rectangle."""
        return Point(self.x.length, self.y.length)

    def vertices(self) -> list[Point]:
        """Return the four corners counter-clockwise from the lower-left."""
        return [
            Point(self.x.lo, self.y.lo),
            Point(self.x.hi, self.y.lo),
            Point(self.x.hi, self.y.hi),
            Point(self.x.lo, self.y.hi),
        ]

    def vertices_array(self) -> NDArray[np.float64]:
        """Return ``vertices()`` as a ``(4, 2)`` float array."""
        return np.array([p.as_tuple() for p in self.vertices()], dtype=np.float64)

    def vertex_ij(self, i: int, j: int) -> Point:
        """Return the corner selected by *i* along x and *j* along y.

        ``i``: 0 = left, 1 = right.  ``j``: 0 = bottom, 1 = top.
        """
        px = self.x.hi if i == 1 else self.x.lo
        py = self.y.hi if j == 1 else self.y.lo
        return Point(px, py)

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    def contains_point(self, p: Point) -> bool:
        """Return True if *p* lies in the rectangle, boundary included."""
        return self.x.contains(p.x) and self.y.contains(p.y)

    def interior_contains_point(self, p: Point) -> bool:
        """Return True if *p* lies in the rectangle, boundary excluded."""
        return self.x.interior_contains(p.x) and self.y.interior_contains(p.y)

    def contains(self, other: Rect) -> bool:
        """Return True if *other* lies entirely within this rectangle.

        The empty rectangle is contained in every rectangle, and no
        non-empty rectangle is contained in an empty one.
        """
        return self.x.contains_interval(other.x) and self.y.contains_interval(other.y)

    def interior_contains(self, other: Rect) -> bool:
        """Return True if the interior of this rectangle contains all of *other*."""
        return self.x.interior_contains_interval(
            other.x
        ) and self.y.interior_contains_interval(other.y)

    def intersects(self, other: Rect) -> bool:
        """Return True if the rectangles have any point in common."""
        return self.x.intersects(other.x) and self.y.intersects(other.y)

    def interior_intersects(self, other: Rect) -> bool:
        """Return True if the interior of this rectangle meets any point of *other*."""
        return self.x.interior_intersects(other.x) and self.y.interior_intersects(other.y)

    def approx_equal(self, other: Rect, epsilon: float = EPSILON) -> bool:
        """Return True if both axes are equal up to *epsilon*."""
        return self.x.approx_equal(other.x, epsilon) and self.y.approx_equal(other.y, epsilon)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def add_point(self, p: Point) -> Rect:
        """Return the rectangle expanded by the minimum amount to contain *p*."""
        return Rect(self.x.add_point(p.x), self.y.add_point(p.y))

    def add_rect(self, other: Rect) -> Rect:
        """Return the rectangle expanded to contain *other*."""
        return Rect(self.x.union(other.x), self.y.union(other.y))

    def clamp_point(self, p: Point) -> Point:
        """Return the point of the rectangle closest to *p*.

        The rectangle must be non-empty.
        """
        return Point(self.x.clamp_point(p.x), self.y.clamp_point(p.y))

    def expanded(self, margin: Point) -> Rect:
        """Return the rectangle grown by ``margin.x`` along x and ``margin.y`` along y.

        Negative margins shrink.  If either axis shrinks to nothing the
        result is ``Rect.empty()``; an empty rectangle stays empty.
        """
        x = self.x.expanded(margin.x)
        y = self.y.expanded(margin.y)
        if x.is_empty or y.is_empty:
            return Rect.empty()
        return Rect(x, y)

    def expanded_by_margin(self, margin: float) -> Rect:
        """Return the rectangle grown by *margin* on all sides."""
        return self.expanded(Point(margin, margin))

    def union(self, other: Rect) -> Rect:
        """Return the smallest rectangle containing both."""
        return Rect(self.x.union(other.x), self.y.union(other.y))

    def intersection(self, other: Rect) -> Rect:
        """Return the rectangle of points common to both, or ``Rect.empty()``."""
        x = self.x.intersection(other.x)
        y = self.y.intersection(other.y)
        if x.is_empty or y.is_empty:
            return Rect.empty()
        return Rect(x, y)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        if self.is_empty:
            return "empty"
        return f"{self.x} x {self.y}"
