"""
Exception hierarchy for enclave.

The geometry types never raise for real-valued input; empty intervals and
rectangles are ordinary values.  These exceptions cover the outer surface:
configuration and command-line input.

All exceptions carry:
- Context information (input text, positions, keys)
- Suggestions for how to fix the issue

Example::

    from enclave.exceptions import ParseError

    raise ParseError(
        "Expected a coordinate pair 'x,y'",
        text="1,2 3",
        position=1,
        suggestions=["Separate x and y with a comma, e.g. '3,4'"],
    )
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class EnclaveError(Exception):
    """
    Base exception for all enclave errors.

    Attributes:
        context: Dictionary of contextual information
        suggestions: List of actionable suggestions for fixing the error
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        self.message = message
        self.context = context or {}
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context and suggestions."""
        parts = [self.message]

        if self.context:
            parts.append("\n\nContext:")
            for key, value in self.context.items():
                parts.append(f"\n  {key}: {value}")

        if self.suggestions:
            parts.append("\n\nSuggestions:")
            for suggestion in self.suggestions:
                parts.append(f"\n  - {suggestion}")

        return "".join(parts)

    def __str__(self) -> str:
        return self._format_message()


class ParseError(EnclaveError):
    """
    Coordinate input could not be parsed.

    Example::

        raise ParseError(
            "Invalid number 'abc'",
            text="1,2 abc,3",
            position=1,
        )
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
        text: Optional[str] = None,
        position: Optional[int] = None,
    ):
        # Build context from convenience parameters
        ctx = context or {}
        if text is not None and "input" not in ctx:
            ctx["input"] = text
        if position is not None and "position" not in ctx:
            ctx["position"] = position

        super().__init__(message, ctx, suggestions)


class ConfigurationError(EnclaveError):
    """
    Configuration value is invalid.

    Example::

        raise ConfigurationError(
            "Invalid epsilon",
            context={"key": "geometry.epsilon", "value": -1.0},
            suggestions=["Use a non-negative tolerance such as 1e-14"],
        )
    """

    pass


__all__ = [
    "EnclaveError",
    "ParseError",
    "ConfigurationError",
]
