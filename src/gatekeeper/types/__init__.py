"""Type definitions for Gatekeeper."""

from gatekeeper.types.checks import CheckKind, CheckOutcome, CheckResult, GateReport
from gatekeeper.types.config import GateConfig
from gatekeeper.types.hooks import HookDecision, HookPayload, HookResponse
from gatekeeper.types.project import (
    LOCK_FILES,
    PackageManager,
    ProjectManifest,
    ProjectProfile,
)

__all__ = [
    "CheckKind",
    "CheckOutcome",
    "CheckResult",
    "GateConfig",
    "GateReport",
    "HookDecision",
    "HookPayload",
    "HookResponse",
    "LOCK_FILES",
    "PackageManager",
    "ProjectManifest",
    "ProjectProfile",
]
