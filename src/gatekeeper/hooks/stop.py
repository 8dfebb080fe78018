"""Stop hook: run the quality gate when a coding session finishes.

Protocol: JSON on stdin, ``{"decision": "block", "reason": ...}`` on stdout
only when blocking, exit code 0 in every case. A malfunction inside the hook
must never block the session, so every error degrades to allow.
"""

from __future__ import annotations

import logging
from pathlib import Path

from gatekeeper.core.gate import QualityGate, build_response
from gatekeeper.hooks.events import parse_payload
from gatekeeper.runner.executor import CommandRunner, create_runner
from gatekeeper.types.config import GateConfig
from gatekeeper.types.hooks import HookResponse

logger = logging.getLogger(__name__)


async def run_stop_hook(
    raw_input: str,
    cwd: str | Path,
    *,
    runner: CommandRunner | None = None,
    config: GateConfig | None = None,
) -> HookResponse:
    """Evaluate the stop hook for ``cwd`` given the raw stdin text."""
    try:
        payload = parse_payload(raw_input)
        if payload.stop_hook_active:
            logger.debug("stop_hook_active set, allowing")
            return HookResponse.allow()

        gate = QualityGate(runner or create_runner(), config)
        report = await gate.run(cwd)
        response = build_response(report)
        if response.blocked:
            logger.info(
                "Blocking session %s: %d failing check(s)",
                payload.session_id or "-", len(report.failures) if report else 0,
            )
        return response
    except Exception:
        logger.exception("Quality gate failed internally, allowing")
        return HookResponse.allow()
