"""Test fixtures including MockCommandRunner for deterministic gate runs."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from gatekeeper.runner.executor import CommandResult, CommandRunner


class MockCommandRunner(CommandRunner):
    """A command runner that returns scripted results and records every call.

    Results are keyed by the full command line, e.g. ``"npm run lint"``.
    A value may be a CommandResult or a list of them (consumed in order,
    last one repeating). Unscripted commands succeed with empty output.

    Usage:
        runner = MockCommandRunner({
            "npm run tsc": CommandResult(exit_code=2, stdout="error TS2322: ..."),
        })
    """

    def __init__(
        self,
        results: dict[str, CommandResult | list[CommandResult]] | None = None,
        *,
        default: CommandResult | None = None,
    ) -> None:
        self._results: dict[str, list[CommandResult]] = {}
        for key, value in (results or {}).items():
            self._results[key] = list(value) if isinstance(value, list) else [value]
        self._default = default or CommandResult(exit_code=0)
        self._calls: list[dict[str, Any]] = []

    async def run(
        self,
        command: str,
        args: list[str] | tuple[str, ...] = (),
        *,
        cwd: str | None = None,
        timeout: float = 120.0,
    ) -> CommandResult:
        line = " ".join([command, *args])
        self._calls.append({"line": line, "cwd": cwd, "timeout": timeout})
        scripted = self._results.get(line)
        if not scripted:
            return self._default
        if len(scripted) > 1:
            return scripted.pop(0)
        return scripted[0]

    @property
    def calls(self) -> list[dict[str, Any]]:
        return self._calls

    @property
    def lines(self) -> list[str]:
        """Command lines in call order, excluding package-manager probes."""
        return [c["line"] for c in self._calls if not c["line"].endswith("--version")]


class RaisingRunner(CommandRunner):
    """A runner that blows up, for exercising internal-error handling."""

    async def run(self, command, args=(), *, cwd=None, timeout=120.0) -> CommandResult:
        raise RuntimeError("runner exploded")


def failed(stdout: str = "", *, exit_code: int = 1, stderr: str = "") -> CommandResult:
    return CommandResult(exit_code=exit_code, stdout=stdout, stderr=stderr)


@pytest.fixture
def make_project(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a package.json (and optional lock file) into a temp dir.

    Usage:
        root = make_project({"lint": "eslint ."}, lock_file="yarn.lock")
    """

    def _make(
        scripts: dict[str, Any] | None = None,
        *,
        lock_file: str | None = "package-lock.json",
        dependencies: dict[str, str] | None = None,
        dev_dependencies: dict[str, str] | None = None,
        name: str = "demo-app",
        subdir: str | None = None,
    ) -> Path:
        root = tmp_path / subdir if subdir else tmp_path / "project"
        root.mkdir(parents=True, exist_ok=True)
        manifest: dict[str, Any] = {"name": name, "version": "1.0.0"}
        if scripts is not None:
            manifest["scripts"] = scripts
        if dependencies:
            manifest["dependencies"] = dependencies
        if dev_dependencies:
            manifest["devDependencies"] = dev_dependencies
        (root / "package.json").write_text(json.dumps(manifest, indent=2))
        if lock_file:
            (root / lock_file).write_text("")
        return root

    return _make


@pytest.fixture
def mock_runner() -> MockCommandRunner:
    return MockCommandRunner()
