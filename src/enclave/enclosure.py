"""
Enclosure checks between rectangles.

Rectangle ``a`` is enclosed by ``b`` when each of ``b``'s axis intervals
contains the corresponding interval of ``a`` (closed containment).  Because
an empty interval is contained in every interval, the empty rectangle is
enclosed by everything.

Example::

    from enclave import Point, Rect
    from enclave.enclosure import check_enclosure, is_enclosed_by

    outer = Rect.from_points([Point(1, 2), Point(5, 7)])
    inner = Rect.from_points([Point(2, 4), Point(3, 6)])

    is_enclosed_by(inner, outer)            # True
    check_enclosure(inner, outer).to_dict() # full report
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from enclave.types import EPSILON, Rect

__all__ = ["EnclosureReport", "check_enclosure", "enclosing", "is_enclosed_by"]

logger = logging.getLogger(__name__)


def is_enclosed_by(a: Rect, b: Rect) -> bool:
    """Return True if rectangle *a* is enclosed by rectangle *b*."""
    return b.contains(a)


def enclosing(target: Rect, candidates: Iterable[Rect]) -> list[Rect]:
    """Return the candidates that enclose *target*, in input order."""
    return [c for c in candidates if is_enclosed_by(target, c)]


@dataclass(frozen=True)
class EnclosureReport:
    """Relationship between an inner and an outer rectangle.

    Attributes:
        inner: Rectangle tested for enclosure.
        outer: Rectangle tested as the enclosure.
        enclosed: ``inner`` is enclosed by ``outer``.
        reverse_enclosed: ``outer`` is enclosed by ``inner``.
        intersects: The rectangles share at least one point.
        approx_equal: The rectangles are equal up to ``epsilon``.
        overlap: Intersection of the two rectangles.
    """

    inner: Rect
    outer: Rect
    enclosed: bool
    reverse_enclosed: bool
    intersects: bool
    approx_equal: bool
    overlap: Rect

    def to_dict(self) -> dict[str, Any]:
        return {
            "inner": _rect_to_dict(self.inner),
            "outer": _rect_to_dict(self.outer),
            "enclosed": self.enclosed,
            "reverse_enclosed": self.reverse_enclosed,
            "intersects": self.intersects,
            "approx_equal": self.approx_equal,
            "overlap": _rect_to_dict(self.overlap),
        }


def check_enclosure(inner: Rect, outer: Rect, epsilon: float = EPSILON) -> EnclosureReport:
    """Compute the enclosure report of *inner* against *outer*."""
    report = EnclosureReport(
        inner=inner,
        outer=outer,
        enclosed=is_enclosed_by(inner, outer),
        reverse_enclosed=is_enclosed_by(outer, inner),
        intersects=inner.intersects(outer),
        approx_equal=inner.approx_equal(outer, epsilon),
        overlap=inner.intersection(outer),
    )
    logger.debug(
        f"Enclosure of {inner} in {outer}: enclosed={report.enclosed}, "
        f"reverse={report.reverse_enclosed}, epsilon={epsilon}"
    )
    return report


def _rect_to_dict(rect: Rect) -> dict[str, Any]:
    if rect.is_empty:
        return {"empty": True}
    return {
        "empty": False,
        "x": [rect.x.lo, rect.x.hi],
        "y": [rect.y.lo, rect.y.hi],
    }
