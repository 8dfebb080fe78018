"""Configuration types for Gatekeeper."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GateConfig:
    """Tunables for a gate run. Loaded from ``[gate]`` in config.toml."""

    command_timeout: float = 120.0
    probe_timeout: float = 10.0
    stdin_timeout: float = 5.0
    max_chars: int = 2000
    max_lines: int = 20
    preferred_manager: str = "pnpm"
    lint: bool = True
    type_check: bool = True
    format: bool = True
    log_level: str = "WARNING"
