"""Parsing of coordinate lists given on the command line.

A coordinate list is a sequence of ``x,y`` pairs separated by whitespace or
semicolons::

    "1,2 1,7 5,2 5,7"
    "1,2;5,7"
"""

from __future__ import annotations

import logging
import re

from enclave.exceptions import ParseError
from enclave.types import Point, Rect

__all__ = ["parse_point", "parse_points", "parse_rect"]

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[\s;]+")


def parse_point(token: str, text: str | None = None, position: int | None = None) -> Point:
    """Parse a single ``x,y`` pair.

    Args:
        token: The pair to parse.
        text: Full input the token came from, for error context.
        position: Index of the token within *text*.

    Raises:
        ParseError: If the token is not two comma-separated numbers.
    """
    parts = token.split(",")
    if len(parts) != 2:
        raise ParseError(
            f"Expected a coordinate pair 'x,y', got '{token}'",
            text=text if text is not None else token,
            position=position,
            suggestions=["Separate x and y with a comma, e.g. '3,4'"],
        )

    try:
        x, y = (float(part) for part in parts)
    except ValueError as e:
        raise ParseError(
            f"Invalid number in coordinate pair '{token}'",
            text=text if text is not None else token,
            position=position,
        ) from e
    return Point(x, y)


def parse_points(text: str) -> list[Point]:
    """Parse a whitespace or ``;`` separated list of ``x,y`` pairs.

    Raises:
        ParseError: If the list is empty or any pair is malformed.
    """
    tokens = [t for t in _SEPARATORS.split(text.strip()) if t]
    if not tokens:
        raise ParseError(
            "No coordinates given",
            text=text,
            suggestions=["Pass at least one 'x,y' pair, e.g. '1,2 5,7'"],
        )
    points = [parse_point(token, text, i) for i, token in enumerate(tokens)]
    logger.debug(f"Parsed {len(points)} point(s) from {text!r}")
    return points


def parse_rect(text: str) -> Rect:
    """Parse a coordinate list into its bounding rectangle."""
    return Rect.from_points(parse_points(text))
