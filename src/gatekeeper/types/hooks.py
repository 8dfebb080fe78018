"""Hook protocol types."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

BLOCK_PREAMBLE = "Code quality issues detected. Please fix the following errors:"


class HookDecision(Enum):
    """Decisions a stop hook can hand back to the orchestrator."""

    ALLOW = "allow"
    BLOCK = "block"


@dataclass(frozen=True, slots=True)
class HookPayload:
    """Fields of the stop-hook input the gate cares about."""

    stop_hook_active: bool = False
    session_id: str = ""
    raw: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class HookResponse:
    """Decision returned to the orchestrator.

    Only a block is ever written out; allow is communicated by silence.
    """

    decision: HookDecision = HookDecision.ALLOW
    reason: str = ""

    @classmethod
    def allow(cls) -> HookResponse:
        return cls()

    @classmethod
    def block(cls, sections: list[str]) -> HookResponse:
        body = "\n\n".join(sections)
        return cls(decision=HookDecision.BLOCK, reason=f"{BLOCK_PREAMBLE}\n\n{body}")

    @property
    def blocked(self) -> bool:
        return self.decision is HookDecision.BLOCK

    def to_json(self) -> str | None:
        """Serialize for stdout, or None when there is nothing to print."""
        if not self.blocked:
            return None
        return json.dumps({"decision": self.decision.value, "reason": self.reason})
