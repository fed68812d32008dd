"""
Configuration file support for enclave.

Provides hierarchical configuration loading from:
1. Project config: .enclave.toml or enclave.toml in the project root
2. User config: ~/.config/enclave/config.toml

CLI arguments override config file values, and project config overrides user config.
"""

import logging
import sys
import warnings
from collections.abc import Iterator
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from enclave.exceptions import ConfigurationError
from enclave.types import EPSILON

logger = logging.getLogger(__name__)

# Config file names to search for in project directories
CONFIG_FILENAMES = [".enclave.toml", "enclave.toml"]

# User-level config path
USER_CONFIG_PATH = Path.home() / ".config" / "enclave" / "config.toml"

OUTPUT_FORMATS = ("table", "json")


@dataclass
class DefaultsConfig:
    """Default options for CLI commands."""

    format: str = "table"
    verbose: bool = False
    quiet: bool = False


@dataclass
class GeometryConfig:
    """Numeric tolerances."""

    epsilon: float = EPSILON


# Config file sections, in display order
SECTIONS = {
    "defaults": DefaultsConfig,
    "geometry": GeometryConfig,
}

# All known config keys for validation
KNOWN_KEYS = {name: tuple(f.name for f in fields(cls)) for name, cls in SECTIONS.items()}


@dataclass
class Config:
    """Merged configuration from all sources."""

    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    geometry: GeometryConfig = field(default_factory=GeometryConfig)

    # Track which file each setting came from (for --show)
    _sources: dict = field(default_factory=dict, repr=False)

    @classmethod
    def load(cls, start_dir: Path | None = None) -> "Config":
        """
        Load configuration with precedence: project > user > defaults.

        Args:
            start_dir: Directory to start searching from (default: current directory)

        Returns:
            Merged configuration object

        Raises:
            ConfigError: If a config file cannot be read or is not valid TOML
            ConfigurationError: If a config value is invalid
        """
        if start_dir is None:
            start_dir = Path.cwd()

        config = cls()
        sources: dict[str, str] = {}

        # Load user config first (lower precedence)
        if USER_CONFIG_PATH.exists():
            logger.debug(f"Loading user config {USER_CONFIG_PATH}")
            _merge_config(config, _load_toml_file(USER_CONFIG_PATH), str(USER_CONFIG_PATH), sources)

        # Load project config (higher precedence)
        project_config = _find_project_config(start_dir)
        if project_config:
            logger.debug(f"Loading project config {project_config}")
            _merge_config(config, _load_toml_file(project_config), str(project_config), sources)

        config._sources = sources
        return config

    def get_source(self, key: str) -> str:
        """Get the source file for a config key."""
        return self._sources.get(key, "default")

    def get(self, key: str) -> Any:
        """
        Look up a value by dotted key, e.g. ``geometry.epsilon``.

        Raises:
            ConfigurationError: If the key is not a known ``section.key``
        """
        section, _, name = key.partition(".")
        if name not in KNOWN_KEYS.get(section, ()):
            known = [f"{s}.{k}" for s, keys in KNOWN_KEYS.items() for k in keys]
            raise ConfigurationError(
                f"Unknown config key '{key}'",
                context={"key": key},
                suggestions=[f"Use a 'section.key' name, one of: {', '.join(known)}"],
            )
        return getattr(getattr(self, section), name)

    def settings(self) -> Iterator[tuple[str, str, Any]]:
        """Yield ``(section, key, value)`` for every setting in schema order."""
        for section, keys in KNOWN_KEYS.items():
            values = getattr(self, section)
            for name in keys:
                yield section, name, getattr(values, name)


class ConfigError(Exception):
    """Configuration file could not be read or parsed."""

    pass


def _find_project_config(start_dir: Path) -> Path | None:
    """
    Find project config by walking up the directory tree.

    Stops at .git directory or filesystem root.
    """
    current = start_dir.resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        # Stop at .git directory (project root)
        if (current / ".git").exists():
            break

        # Stop at filesystem root
        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def _load_toml_file(path: Path) -> dict[str, Any]:
    """
    Load a TOML file.

    Raises:
        ConfigError: If the file cannot be read or the TOML is invalid
    """
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e


def _merge_config(
    config: Config, data: dict[str, Any], source: str, sources: dict[str, str]
) -> None:
    """
    Merge loaded config data into Config object.

    Args:
        config: Config object to update
        data: Raw config data from TOML
        source: Source file path (for tracking)
        sources: Dict to update with source info
    """
    for key in data:
        if key not in KNOWN_KEYS:
            warnings.warn(f"Unknown config key '{key}' in {source}", stacklevel=3)

    for section, keys in KNOWN_KEYS.items():
        if section not in data:
            continue
        section_data = data[section]
        if not isinstance(section_data, dict):
            raise ConfigurationError(
                f"Config section '{section}' must be a table",
                context={"key": section, "file": source},
                suggestions=[f"Put its settings under a [{section}] header"],
            )
        _warn_unknown_keys(section_data, keys, section, source)

        target = getattr(config, section)
        for name in keys:
            if name in section_data:
                key = f"{section}.{name}"
                setattr(target, name, _VALIDATORS[key](section_data[name], key, source))
                sources[key] = source


def _validate_format(value: Any, key: str, source: str) -> str:
    if value not in OUTPUT_FORMATS:
        raise ConfigurationError(
            f"Invalid output format '{value}'",
            context={"key": key, "file": source},
            suggestions=[f"Use one of: {', '.join(OUTPUT_FORMATS)}"],
        )
    return value


def _validate_flag(value: Any, key: str, source: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(
            f"Setting '{key}' must be true or false",
            context={"key": key, "value": value, "file": source},
        )
    return value


def validate_epsilon(value: Any, key: str = "epsilon", source: str | None = None) -> float:
    """
    Check that *value* is usable as an approximate-equality tolerance.

    Raises:
        ConfigurationError: If the value is not a non-negative number
    """
    context: dict[str, Any] = {"key": key, "value": value}
    if source:
        context["file"] = source

    if isinstance(value, bool) or not isinstance(value, (int, float)) or not value >= 0:
        raise ConfigurationError(
            "Tolerance must be a non-negative number",
            context=context,
            suggestions=[f"Use a small value such as {EPSILON}"],
        )
    return float(value)


_VALIDATORS = {
    "defaults.format": _validate_format,
    "defaults.verbose": _validate_flag,
    "defaults.quiet": _validate_flag,
    "geometry.epsilon": validate_epsilon,
}


def _warn_unknown_keys(
    data: dict[str, Any], known: tuple[str, ...], section: str, source: str
) -> None:
    """Warn about unknown keys in a config section."""
    for key in data:
        if key not in known:
            warnings.warn(f"Unknown config key '{section}.{key}' in {source}", stacklevel=4)


def generate_template() -> str:
    """
    Generate a template config file with all options documented.

    Returns:
        Template TOML string
    """
    return """# enclave configuration file
# Place as .enclave.toml in project root or ~/.config/enclave/config.toml for user defaults

[defaults]
# Output format: table, json
# format = "table"

# Enable verbose (debug logging) output by default
# verbose = false

# Enable quiet mode by default
# quiet = false

[geometry]
# Tolerance used when comparing rectangles for approximate equality
# epsilon = 1e-14
"""


def get_config_paths() -> dict[str, Path | None]:
    """
    Get paths to config files that would be loaded.

    Returns:
        Dict with 'user' and 'project' keys
    """
    project_config = _find_project_config(Path.cwd())

    return {
        "user": USER_CONFIG_PATH if USER_CONFIG_PATH.exists() else None,
        "project": project_config,
    }
