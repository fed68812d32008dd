"""Closed interval type used for each axis of a rectangle.

Provides an ``Interval`` dataclass representing the closed set
``{t : lo <= t <= hi}`` on the real line.  An interval with ``lo > hi`` is
empty; there is no separate flag, so several representations of the empty
set exist and all of them compare equal.  ``Interval.empty()`` returns the
canonical one, ``[1.0, 0.0]``.

Example::

    from enclave.types import Interval

    a = Interval(1.0, 5.0)
    b = Interval.from_point(3.0)

    a.contains(3.0)              # True
    a.contains_interval(b)       # True
    a.intersection(Interval(6.0, 8.0)).is_empty   # True
    Interval.empty().length      # -1.0, empty intervals have negative length
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["EPSILON", "Interval"]

#: Default tolerance for approximate equality.
EPSILON = 1e-14


@dataclass(frozen=True, eq=False)
class Interval:
    """A closed interval ``[lo, hi]``.

    Attributes:
        lo: Lower bound (inclusive).
        hi: Upper bound (inclusive).  ``hi < lo`` means the interval is empty.
    """

    lo: float = 0.0
    hi: float = 0.0

    # ------------------------------------------------------------------
    # Factory methods
    # ------------------------------------------------------------------

    @classmethod
    def empty(cls) -> Interval:
        """Return the canonical empty interval."""
        return cls(1.0, 0.0)

    @classmethod
    def from_point(cls, value: float) -> Interval:
        """Create a single-point (degenerate) interval."""
        return cls(value, value)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def is_empty(self) -> bool:
        """True if the interval contains no points."""
        return self.lo > self.hi

    @property
    def center(self) -> float:
        """Midpoint of the interval.  Not meaningful for empty intervals."""
        return 0.5 * (self.lo + self.hi)

    @property
    def length(self) -> float:
        """Length of the interval (``hi - lo``), negative when empty."""
        return self.hi - self.lo

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    def equal(self, other: Interval) -> bool:
        """Return True if both intervals contain the same points."""
        return (self.lo == other.lo and self.hi == other.hi) or (
            self.is_empty and other.is_empty
        )

    def contains(self, value: float) -> bool:
        """Return True if *value* lies within ``[lo, hi]``."""
        return self.lo <= value <= self.hi

    def contains_interval(self, other: Interval) -> bool:
        """Return True if *other* is entirely within this interval.

        The empty interval is contained in every interval.
        """
        return other.is_empty or (self.lo <= other.lo and other.hi <= self.hi)

    def interior_contains(self, value: float) -> bool:
        """Return True if *value* lies strictly within ``(lo, hi)``."""
        return self.lo < value < self.hi

    def interior_contains_interval(self, other: Interval) -> bool:
        """Return True if *other* lies within the interior of this interval."""
        return other.is_empty or (self.lo < other.lo and other.hi < self.hi)

    def intersects(self, other: Interval) -> bool:
        """Return True if the two intervals share at least one point."""
        if self.is_empty or other.is_empty:
            return False
        return max(self.lo, other.lo) <= min(self.hi, other.hi)

    def interior_intersects(self, other: Interval) -> bool:
        """Return True if the interior of this interval shares a point with *other*.

        The boundary of *other* counts.
        """
        return (
            other.lo < self.hi
            and self.lo < other.hi
            and self.lo < self.hi
            and other.lo <= other.hi
        )

    def approx_equal(self, other: Interval, epsilon: float = EPSILON) -> bool:
        """Return True if *other* can be reached by moving each endpoint at most *epsilon*.

        The empty interval has no position on the line, so any interval no
        longer than ``2 * epsilon`` matches it.
        """
        if self.is_empty:
            return other.length <= 2 * epsilon
        if other.is_empty:
            return self.length <= 2 * epsilon
        return abs(other.lo - self.lo) <= epsilon and abs(other.hi - self.hi) <= epsilon

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def intersection(self, other: Interval) -> Interval:
        """Return the points common to both intervals.

        The result is empty when the inputs do not overlap.
        """
        return Interval(max(self.lo, other.lo), min(self.hi, other.hi))

    def union(self, other: Interval) -> Interval:
        """Return the smallest interval containing both."""
        if self.is_empty:
            return other
        if other.is_empty:
            return self
        return Interval(min(self.lo, other.lo), max(self.hi, other.hi))

    def add_point(self, value: float) -> Interval:
        """Return the interval expanded by the minimum amount to contain *value*."""
        if self.is_empty:
            return Interval(value, value)
        if value < self.lo:
            return Interval(value, self.hi)
        if value > self.hi:
            return Interval(self.lo, value)
        return self

    def clamp_point(self, value: float) -> float:
        """Return the point of the interval closest to *value*.

        The interval must be non-empty.
        """
        return max(self.lo, min(self.hi, value))

    def expanded(self, margin: float) -> Interval:
        """Return the interval grown by *margin* on each side.

        A negative margin shrinks the interval and may leave it empty.
        An empty interval stays unchanged.
        """
        if self.is_empty:
            return self
        return Interval(self.lo - margin, self.hi + margin)

    # ------------------------------------------------------------------
    # Comparison helpers
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.equal(other)

    def __hash__(self) -> int:
        if self.is_empty:
            return hash(("Interval", "empty"))
        return hash((self.lo, self.hi))

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __repr__(self) -> str:
        return f"Interval({self.lo}, {self.hi})"

    def __str__(self) -> str:
        if self.is_empty:
            return "empty"
        return f"[{self.lo}, {self.hi}]"
