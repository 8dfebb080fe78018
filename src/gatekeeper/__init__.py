"""Gatekeeper: quality gate and hooks for AI coding sessions.

Usage:
    import asyncio
    from gatekeeper import QualityGate, build_response, create_runner

    report = asyncio.run(QualityGate(create_runner()).run("."))
    print(build_response(report).to_json())
"""

from gatekeeper.core.gate import QualityGate, build_response
from gatekeeper.errors import ConfigError, GatekeeperError, ManifestError
from gatekeeper.hooks.stop import run_stop_hook
from gatekeeper.runner import CommandResult, CommandRunner, create_runner
from gatekeeper.types.checks import CheckKind, CheckOutcome, CheckResult, GateReport
from gatekeeper.types.config import GateConfig
from gatekeeper.types.hooks import HookDecision, HookPayload, HookResponse
from gatekeeper.types.project import PackageManager, ProjectManifest, ProjectProfile

__version__ = "0.1.0"

__all__ = [
    # Core API
    "QualityGate",
    "build_response",
    "run_stop_hook",
    # Execution
    "CommandResult",
    "CommandRunner",
    "create_runner",
    # Results
    "CheckKind",
    "CheckOutcome",
    "CheckResult",
    "GateReport",
    "HookDecision",
    "HookPayload",
    "HookResponse",
    # Project
    "PackageManager",
    "ProjectManifest",
    "ProjectProfile",
    # Configuration
    "GateConfig",
    # Errors
    "ConfigError",
    "GatekeeperError",
    "ManifestError",
]
