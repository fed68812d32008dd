"""Shared utilities for CLI commands."""

from __future__ import annotations

import logging
import sys
import traceback
from typing import TYPE_CHECKING

from enclave.exceptions import EnclaveError

if TYPE_CHECKING:
    from rich.console import Console

__all__ = ["configure_logging", "format_error", "print_error", "get_error_console"]

# Module-level console for error output, created lazily
_error_console: Console | None = None


def get_error_console() -> Console:
    """Get or create the Rich console for error output.

    The console writes to stderr and is cached for reuse.
    """
    global _error_console
    if _error_console is None:
        from rich.console import Console

        _error_console = Console(stderr=True, force_terminal=None)
    return _error_console


def configure_logging(verbose: bool) -> None:
    """Send debug logging to stderr when *verbose* is set."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )


def print_error(
    e: Exception,
    verbose: bool = False,
    use_rich: bool | None = None,
) -> None:
    """
    Print an exception with Rich formatting on a terminal.

    Falls back to plain text for non-TTY output (pipes, captured streams).

    Args:
        e: The exception to print
        verbose: If True, include full stack trace
        use_rich: Override automatic TTY detection (None = auto-detect)
    """
    console = get_error_console()

    if use_rich is None:
        use_rich = console.is_terminal

    if verbose:
        # Always use plain text for stack traces
        print(traceback.format_exc(), file=sys.stderr)
        return

    if use_rich and isinstance(e, EnclaveError):
        from rich.markup import escape

        console.print(f"[bold red]Error:[/bold red] {escape(e.message)}")
        if e.context:
            console.print("[dim]Context:[/dim]")
            for key, value in e.context.items():
                console.print(f"  {escape(str(key))}: {escape(str(value))}")
        if e.suggestions:
            console.print("[dim]Suggestions:[/dim]")
            for suggestion in e.suggestions:
                console.print(f"  [green]-[/green] {escape(suggestion)}")
    else:
        print(format_error(e), file=sys.stderr)


def format_error(e: Exception, verbose: bool = False) -> str:
    """
    Format an exception for user-friendly display (plain text).

    Args:
        e: The exception to format
        verbose: If True, include full stack trace

    Returns:
        Formatted error message string
    """
    if verbose:
        return traceback.format_exc()

    if isinstance(e, EnclaveError):
        return f"Error: {e}"

    return f"Error: {type(e).__name__}: {e}"
