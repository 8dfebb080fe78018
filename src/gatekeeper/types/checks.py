"""Check types for the quality gate."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class CheckKind(Enum):
    """Quality checks the gate knows how to run, in execution order."""

    LINT = "lint"
    TYPE_CHECK = "type-check"
    FORMAT = "format"

    @property
    def label(self) -> str:
        """Heading used for this check in a block reason."""
        return _LABELS[self]

    @property
    def blocking(self) -> bool:
        """Whether a failure of this check can block completion."""
        return self is not CheckKind.FORMAT


_LABELS: dict[CheckKind, str] = {
    CheckKind.LINT: "ESLint errors found:",
    CheckKind.TYPE_CHECK: "TypeScript errors found:",
    CheckKind.FORMAT: "Formatting failed:",
}


class CheckOutcome(Enum):
    """Outcome of a single check."""

    PASSED = "passed"
    FIXED = "fixed"  # Auto-fix applied, nothing left to report
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Result of running one declared check."""

    kind: CheckKind
    script: str
    outcome: CheckOutcome
    output: str = ""
    duration_sec: float = 0.0

    @property
    def failed(self) -> bool:
        return self.outcome is CheckOutcome.FAILED

    @property
    def blocking(self) -> bool:
        return self.failed and self.kind.blocking and bool(self.output.strip())

    def describe(self) -> str:
        """Label followed by the captured diagnostic."""
        return f"{self.kind.label}\n{self.output}"


@dataclass(slots=True)
class GateReport:
    """Aggregated results of one gate run."""

    project_root: Path | None = None
    package_manager: str | None = None
    results: list[CheckResult] = field(default_factory=list)

    @property
    def failures(self) -> list[CheckResult]:
        """Failures that block completion, in execution order."""
        return [r for r in self.results if r.blocking]

    @property
    def blocked(self) -> bool:
        return bool(self.failures)

    def add(self, result: CheckResult) -> None:
        self.results.append(result)
