"""CommandRunner ABC + factory."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(slots=True)
class CommandResult:
    """Result from running an external command."""

    exit_code: int
    stdout: str = ""
    stderr: str = ""
    timed_out: bool = False
    error: str | None = None
    duration_sec: float = 0.0

    @property
    def ok(self) -> bool:
        return self.exit_code == 0 and not self.timed_out and self.error is None

    def diagnostic(self, command: str) -> str:
        """Best text to show a user for a failed run. Never empty."""
        if self.stdout.strip():
            return self.stdout
        if self.stderr.strip():
            return self.stderr
        if self.error:
            return self.error
        return f"`{command}` exited with code {self.exit_code}"


class CommandRunner(ABC):
    """Runs external tools. Implementations must never raise for tool failures.

    Spawn errors and timeouts are reported through ``CommandResult`` so the
    caller can treat them like any other failing exit.
    """

    @abstractmethod
    async def run(
        self,
        command: str,
        args: list[str] | tuple[str, ...] = (),
        *,
        cwd: str | None = None,
        timeout: float = 120.0,
    ) -> CommandResult:
        """Run ``command`` with ``args`` and wait for it to finish."""
        ...


def create_runner() -> CommandRunner:
    """Factory for the default subprocess-backed runner."""
    from gatekeeper.runner.process import ProcessRunner
    return ProcessRunner()
