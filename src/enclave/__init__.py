"""
enclave: 2D points, closed intervals and axis-aligned rectangles.

This package provides small immutable geometry primitives with exact
handling of degenerate and empty values, plus enclosure checks between
rectangles.

Modules:
    types: Point, Interval and Rect value types
    enclosure: Enclosure predicate and reports
    config: TOML configuration loading
    exceptions: Error hierarchy
    cli: ``enclave`` command-line interface

Quick Start::

    from enclave import Point, Rect, is_enclosed_by

    a = Rect.from_points([Point(1, 2), Point(1, 7), Point(5, 2), Point(5, 7)])
    b = Rect.from_points([Point(2, 4), Point(2, 6), Point(3, 4), Point(3, 6)])

    is_enclosed_by(b, a)   # True
    is_enclosed_by(a, b)   # False
"""

__version__ = "0.1.0"

from enclave.enclosure import EnclosureReport, check_enclosure, enclosing, is_enclosed_by
from enclave.types import EPSILON, Interval, Point, Rect

__all__ = [
    # Version
    "__version__",
    # Types
    "EPSILON",
    "Interval",
    "Point",
    "Rect",
    # Enclosure
    "EnclosureReport",
    "check_enclosure",
    "enclosing",
    "is_enclosed_by",
]
