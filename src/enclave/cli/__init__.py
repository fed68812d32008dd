"""
Command-line interface for enclave.

Provides CLI commands via the `enclave` command:

    enclave check --inner POINTS --outer POINTS   - Test rectangle enclosure
    enclave config [--show|--init|--paths]        - Manage configuration

Examples:
    enclave check --inner "2,4 2,6 3,4 3,6" --outer "1,2 1,7 5,2 5,7"
    enclave check --inner "0,0 2,2" --outer "1,1 3,3" --format json
    enclave config --show
"""

import argparse
import sys
from typing import List, Optional

from enclave import __version__
from enclave.cli import check_cmd, config_cmd

__all__ = ["main"]


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for enclave CLI."""
    parser = argparse.ArgumentParser(
        prog="enclave",
        description="Axis-aligned rectangle enclosure toolkit",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--version", action="version", version=f"enclave {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    check_parser = subparsers.add_parser("check", help="Test rectangle enclosure")
    check_cmd.add_arguments(check_parser)
    check_parser.set_defaults(run=check_cmd.run)

    config_parser = subparsers.add_parser("config", help="Manage configuration")
    config_cmd.add_arguments(config_parser)
    config_parser.set_defaults(run=config_cmd.run)

    if argv is None:
        argv = sys.argv[1:]
    args = parser.parse_args(check_cmd.join_coordinate_options(argv))

    if not args.command:
        parser.print_help()
        return 0

    return args.run(args)


if __name__ == "__main__":
    sys.exit(main())
