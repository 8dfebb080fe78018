"""Exceptions raised by Gatekeeper."""

from __future__ import annotations

from pathlib import Path


class GatekeeperError(Exception):
    """Base class for gatekeeper errors."""


class ManifestError(GatekeeperError):
    """Raised when ``package.json`` cannot be read or parsed."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class ConfigError(GatekeeperError):
    """Raised when a config file holds an invalid value."""
