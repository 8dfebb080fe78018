"""Configuration loading (.gatekeeper/config.toml)."""

from __future__ import annotations

import dataclasses
import logging
import tomllib
from pathlib import Path
from typing import Any

from gatekeeper.errors import ConfigError
from gatekeeper.types.config import GateConfig

logger = logging.getLogger(__name__)

CONFIG_DIR = ".gatekeeper"
CONFIG_FILE = "config.toml"

_FLOAT_KEYS = ("command_timeout", "probe_timeout", "stdin_timeout")
_INT_KEYS = ("max_chars", "max_lines")
_BOOL_KEYS = ("lint", "type_check", "format")
_STR_KEYS = ("preferred_manager", "log_level")


def config_paths(cwd: str | Path | None = None) -> list[Path]:
    """Candidate config files, highest priority first."""
    search_dirs: list[Path] = []
    if cwd:
        search_dirs.append(Path(cwd))
    search_dirs.append(Path.cwd())

    paths = [d / CONFIG_DIR / CONFIG_FILE for d in search_dirs]
    paths.append(Path.home() / CONFIG_DIR / CONFIG_FILE)
    # Dedupe while keeping order
    return list(dict.fromkeys(paths))


def find_config_file(cwd: str | Path | None = None) -> Path | None:
    for path in config_paths(cwd):
        if path.is_file():
            return path
    return None


def load_config(cwd: str | Path | None = None) -> GateConfig:
    """Load the gate config, falling back to defaults on any problem."""
    path = find_config_file(cwd)
    if path is None:
        return GateConfig()

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return parse_config(data.get("gate", {}))
    except (OSError, tomllib.TOMLDecodeError, ConfigError) as exc:
        logger.warning("Ignoring config file %s: %s", path, exc)
        return GateConfig()


def parse_config(data: dict[str, Any]) -> GateConfig:
    """Parse the ``[gate]`` table into a GateConfig.

    Unknown keys are ignored. A value of the wrong type raises ConfigError.
    """
    if not isinstance(data, dict):
        raise ConfigError("[gate] must be a table")

    values: dict[str, Any] = {}
    for key in _FLOAT_KEYS:
        if key in data:
            value = data[key]
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
                raise ConfigError(f"{key} must be a positive number")
            values[key] = float(value)
    for key in _INT_KEYS:
        if key in data:
            value = data[key]
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ConfigError(f"{key} must be a positive integer")
            values[key] = value
    for key in _BOOL_KEYS:
        if key in data:
            if not isinstance(data[key], bool):
                raise ConfigError(f"{key} must be true or false")
            values[key] = data[key]
    for key in _STR_KEYS:
        if key in data:
            if not isinstance(data[key], str):
                raise ConfigError(f"{key} must be a string")
            values[key] = data[key]

    return GateConfig(**values)


def config_as_dict(config: GateConfig) -> dict[str, Any]:
    return dataclasses.asdict(config)


def generate_config_template() -> str:
    """Generate a default .gatekeeper/config.toml template."""
    return """\
# Gatekeeper configuration
# Place in <project>/.gatekeeper/config.toml or ~/.gatekeeper/config.toml

[gate]
# Wall-clock bound for each lint/type-check/format run (seconds)
command_timeout = 120
# Bound for probing whether the preferred package manager is installed
probe_timeout = 10
# How long the stop hook waits for its JSON payload on stdin
stdin_timeout = 5

# Diagnostic truncation
max_chars = 2000
max_lines = 20

# Package manager probed when the project has no lock file
preferred_manager = "pnpm"

# Enable or disable individual checks
lint = true
type_check = true
format = true

log_level = "WARNING"
"""
