"""Check command: test whether one rectangle is enclosed by another.

Each rectangle is given as a list of points and taken as their bounding
rectangle.

Usage:
    enclave check --inner "2,4 2,6 3,4 3,6" --outer "1,2 1,7 5,2 5,7"
    enclave check --inner "2,4 3,6" --outer "1,2 5,7" --format json
    enclave check --inner -1,-1 --outer "-2,-2 2,2"

Exit codes:
    0  inner is enclosed by outer
    1  inner is not enclosed by outer
    2  invalid input or configuration
"""

from __future__ import annotations

import argparse
import json
import sys

from rich.console import Console
from rich.table import Table

from enclave.cli.parsers import parse_rect
from enclave.cli.utils import configure_logging, print_error
from enclave.config import OUTPUT_FORMATS, Config, ConfigError, validate_epsilon
from enclave.enclosure import EnclosureReport, check_enclosure
from enclave.exceptions import EnclaveError

EXIT_ENCLOSED = 0
EXIT_NOT_ENCLOSED = 1
EXIT_ERROR = 2

COORDINATE_OPTIONS = ("--inner", "--outer")


def join_coordinate_options(argv: list[str]) -> list[str]:
    """Attach each ``--inner`` / ``--outer`` value to its option.

    argparse reads a lone value such as ``-1,-1`` as an unknown option, so
    ``["--inner", "-1,-1"]`` becomes ``["--inner=-1,-1"]``.  A following
    ``--`` option is left alone so a missing value is still reported.
    """
    joined = []
    args = iter(argv)
    for arg in args:
        if arg in COORDINATE_OPTIONS:
            value = next(args, None)
            if value is None:
                joined.append(arg)
            elif value.startswith("--"):
                joined.extend([arg, value])
            else:
                joined.append(f"{arg}={value}")
        else:
            joined.append(arg)
    return joined


def add_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the check command's arguments to *parser*."""
    parser.add_argument(
        "--inner",
        required=True,
        help="Points of the rectangle tested for enclosure, e.g. '2,4 3,6'",
    )
    parser.add_argument(
        "--outer",
        required=True,
        help="Points of the enclosing rectangle, e.g. '1,2 5,7'",
    )
    parser.add_argument(
        "--format",
        "-f",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (default: from config, else table)",
    )
    parser.add_argument(
        "--epsilon",
        type=float,
        default=None,
        help="Tolerance for approximate equality (default: from config, else 1e-14)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Suppress table output, report via exit code"
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for check command."""
    parser = argparse.ArgumentParser(
        prog="enclave check",
        description="Check whether one rectangle is enclosed by another",
    )
    add_arguments(parser)
    if argv is None:
        argv = sys.argv[1:]
    return run(parser.parse_args(join_coordinate_options(argv)))


def run(args: argparse.Namespace) -> int:
    """Run the check command on parsed arguments."""
    try:
        config = Config.load()
        configure_logging(args.verbose or config.defaults.verbose)

        if args.epsilon is not None:
            epsilon = validate_epsilon(args.epsilon, key="--epsilon")
        else:
            epsilon = config.geometry.epsilon

        inner = parse_rect(args.inner)
        outer = parse_rect(args.outer)
    except (EnclaveError, ConfigError) as e:
        print_error(e, verbose=args.verbose)
        return EXIT_ERROR

    report = check_enclosure(inner, outer, epsilon)

    output_format = args.format or config.defaults.format
    if output_format == "json":
        print(json.dumps(report.to_dict(), indent=2))
    elif not (args.quiet or config.defaults.quiet):
        _print_table(report)

    return EXIT_ENCLOSED if report.enclosed else EXIT_NOT_ENCLOSED


def _print_table(report: EnclosureReport) -> None:
    """Print the report as a Rich table."""
    console = Console()

    rects = Table(title="Rectangles")
    rects.add_column("Name", style="cyan")
    rects.add_column("x")
    rects.add_column("y")
    for name, rect in (("inner", report.inner), ("outer", report.outer)):
        rects.add_row(name, str(rect.x), str(rect.y))
    console.print(rects)

    relations = Table(title="Relations")
    relations.add_column("Relation", style="cyan")
    relations.add_column("Result")
    relations.add_row("inner enclosed by outer", _yes_no(report.enclosed))
    relations.add_row("outer enclosed by inner", _yes_no(report.reverse_enclosed))
    relations.add_row("intersect", _yes_no(report.intersects))
    relations.add_row("approximately equal", _yes_no(report.approx_equal))
    relations.add_row("overlap", str(report.overlap))
    console.print(relations)


def _yes_no(value: bool) -> str:
    return "[green]yes[/green]" if value else "[red]no[/red]"


if __name__ == "__main__":
    sys.exit(main())
