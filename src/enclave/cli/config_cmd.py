"""
Config command for enclave CLI.

Usage:
    enclave config --show          Show effective configuration with sources
    enclave config --init [--user] Write a commented template config file
    enclave config --paths         Show where config files are looked up
    enclave config get <key>       Print one value, e.g. geometry.epsilon
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

import enclave.config as config_module
from enclave.cli.utils import print_error
from enclave.config import (
    CONFIG_FILENAMES,
    Config,
    ConfigError,
    generate_template,
    get_config_paths,
)
from enclave.exceptions import EnclaveError


def add_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the config command's arguments to *parser*."""
    action_group = parser.add_mutually_exclusive_group()
    action_group.add_argument(
        "--show", action="store_true", help="Show effective configuration with sources"
    )
    action_group.add_argument(
        "--init", action="store_true", help="Write a template config file"
    )
    action_group.add_argument(
        "--paths", action="store_true", help="Show config file locations"
    )
    parser.add_argument("action", nargs="?", choices=["get"], help="Config action")
    parser.add_argument("key", nargs="?", help="Config key (e.g., geometry.epsilon)")
    parser.add_argument(
        "--user",
        action="store_true",
        help="With --init, write the user config instead of ./.enclave.toml",
    )


def run(args: argparse.Namespace) -> int:
    """Run the config command on parsed arguments."""
    try:
        if args.init:
            return _init_config(args.user)
        if args.paths:
            return _show_paths()
        if args.action == "get":
            if not args.key:
                print("Error: 'get' requires a key argument", file=sys.stderr)
                return 1
            return _get_config(args.key)
        return _show_config()
    except (ConfigError, EnclaveError) as e:
        print_error(e)
        return 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point for config command."""
    parser = argparse.ArgumentParser(
        prog="enclave config",
        description="Manage enclave configuration",
    )
    add_arguments(parser)
    return run(parser.parse_args(argv))


def _toml_value(value: Any) -> str:
    """Render a setting the way it would be written in a config file."""
    if isinstance(value, (str, bool)):
        return json.dumps(value)
    return repr(value)


def _show_config() -> int:
    config = Config.load()

    print("# Effective enclave configuration")
    section = None
    for current, name, value in config.settings():
        if current != section:
            print()
            print(f"[{current}]")
            section = current
        source = config.get_source(f"{current}.{name}")
        origin = source if source == "default" else Path(source).name
        print(f"{name} = {_toml_value(value)}  # from: {origin}")
    return 0


def _show_paths() -> int:
    paths = get_config_paths()
    user, project = paths["user"], paths["project"]

    print(f"user     {config_module.USER_CONFIG_PATH}  ({'found' if user else 'not found'})")
    if project:
        print(f"project  {project}  (found)")
    else:
        print(f"project  not found (searched for {', '.join(CONFIG_FILENAMES)} up to the repo root)")
    return 0


def _init_config(user: bool = False) -> int:
    target = config_module.USER_CONFIG_PATH if user else Path.cwd() / CONFIG_FILENAMES[0]

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "x") as f:
            f.write(generate_template())
    except FileExistsError:
        print(f"Error: {target} already exists; edit or remove it first", file=sys.stderr)
        return 1
    except OSError as e:
        raise ConfigError(f"Cannot write config file {target}: {e}") from e

    print(f"Wrote config template to {target}")
    return 0


def _get_config(key: str) -> int:
    config = Config.load()
    value = config.get(key)
    print(value if isinstance(value, str) else _toml_value(value))

    source = config.get_source(key)
    if source != "default":
        print(f"# source: {source}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
