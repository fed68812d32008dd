"""Geometry value types for enclave.

This package provides the immutable primitives the rest of the library is
built on: ``Point`` vectors, closed ``Interval`` ranges and axis-aligned
``Rect`` rectangles.
"""

from __future__ import annotations

from .interval import EPSILON, Interval
from .point import Point
from .rect import Rect

__all__ = ["EPSILON", "Interval", "Point", "Rect"]
