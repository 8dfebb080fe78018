"""QualityGate runs a project's declared checks and decides block/allow.

Checks always run in the same order:

    lint --fix  ->  lint  ->  type-check  ->  format --write

The lint fix pass may rewrite files that the type checker then reads, and
formatting runs last, only when nothing failed, so its churn never hides a
real lint or type error.
"""

from __future__ import annotations

import logging
from pathlib import Path

from gatekeeper.core.project import (
    FORMAT_SCRIPTS,
    LINT_SCRIPTS,
    TYPE_CHECK_SCRIPTS,
    detect_package_manager,
    find_project_root,
    load_manifest,
)
from gatekeeper.core.truncate import MARKERS, truncate_output
from gatekeeper.runner.executor import CommandResult, CommandRunner
from gatekeeper.types.checks import CheckKind, CheckOutcome, CheckResult, GateReport
from gatekeeper.types.config import GateConfig
from gatekeeper.types.hooks import HookResponse
from gatekeeper.types.project import PackageManager, ProjectManifest

logger = logging.getLogger(__name__)

FIX_FLAG = "--fix"
WRITE_FLAG = "--write"


class QualityGate:
    """Discovers and runs lint, type-check and format scripts for a project."""

    def __init__(self, runner: CommandRunner, config: GateConfig | None = None) -> None:
        self._runner = runner
        self._config = config or GateConfig()

    @property
    def config(self) -> GateConfig:
        return self._config

    async def run(self, cwd: str | Path) -> GateReport | None:
        """Run the gate for the project enclosing ``cwd``.

        Returns None when there is no project to check.
        """
        root = find_project_root(cwd)
        if root is None:
            logger.debug("No package.json at or above %s", cwd)
            return None
        return await self.evaluate(root)

    async def evaluate(self, project_root: str | Path) -> GateReport:
        """Run every enabled, declared check for the project at ``project_root``."""
        root = Path(project_root)
        manifest = load_manifest(root)
        manager = await detect_package_manager(
            root,
            self._runner,
            preferred=self._config.preferred_manager,
            probe_timeout=self._config.probe_timeout,
        )
        report = GateReport(project_root=root, package_manager=manager.value)

        lint_script = manifest.first_script(LINT_SCRIPTS)
        if self._config.lint and lint_script:
            report.add(await self._lint(root, manager, lint_script))

        type_script = manifest.first_script(TYPE_CHECK_SCRIPTS)
        if self._config.type_check and type_script:
            report.add(await self._type_check(root, manager, type_script))

        format_script = manifest.first_script(FORMAT_SCRIPTS)
        if self._config.format and format_script:
            if report.failures:
                report.add(CheckResult(CheckKind.FORMAT, format_script, CheckOutcome.SKIPPED))
            else:
                report.add(await self._format(root, manager, manifest, format_script))

        return report

    async def _lint(self, root: Path, manager: PackageManager, script: str) -> CheckResult:
        # Linters often exit non-zero even after fixing everything they can,
        # so the fix pass result is ignored and the verify pass decides.
        fix = await self._invoke(root, manager, script, [FIX_FLAG])
        if not fix.ok:
            logger.debug("Lint fix pass exited %d", fix.exit_code)

        verify = await self._invoke(root, manager, script)
        duration = fix.duration_sec + verify.duration_sec
        if verify.ok:
            return CheckResult(CheckKind.LINT, script, CheckOutcome.FIXED, duration_sec=duration)
        return self._failure(CheckKind.LINT, manager, script, verify, duration)

    async def _type_check(self, root: Path, manager: PackageManager, script: str) -> CheckResult:
        result = await self._invoke(root, manager, script)
        if result.ok:
            return CheckResult(
                CheckKind.TYPE_CHECK, script, CheckOutcome.PASSED,
                duration_sec=result.duration_sec,
            )
        return self._failure(CheckKind.TYPE_CHECK, manager, script, result, result.duration_sec)

    async def _format(
        self, root: Path, manager: PackageManager, manifest: ProjectManifest, script: str,
    ) -> CheckResult:
        extra = [] if WRITE_FLAG in manifest.scripts[script] else [WRITE_FLAG, "."]
        result = await self._invoke(root, manager, script, extra)
        if result.ok:
            return CheckResult(
                CheckKind.FORMAT, script, CheckOutcome.FIXED,
                duration_sec=result.duration_sec,
            )
        logger.warning("Format script '%s' failed (non-blocking)", script)
        return self._failure(CheckKind.FORMAT, manager, script, result, result.duration_sec)

    async def _invoke(
        self,
        root: Path,
        manager: PackageManager,
        script: str,
        extra: list[str] | None = None,
    ) -> CommandResult:
        args = manager.run_args(script, extra or [])
        logger.debug("Running %s %s", manager.value, " ".join(args))
        return await self._runner.run(
            manager.value, args, cwd=str(root), timeout=self._config.command_timeout,
        )

    def _failure(
        self,
        kind: CheckKind,
        manager: PackageManager,
        script: str,
        result: CommandResult,
        duration: float,
    ) -> CheckResult:
        command = " ".join([manager.value, *manager.run_args(script)])
        output = truncate_output(
            result.diagnostic(command),
            MARKERS[kind],
            max_chars=self._config.max_chars,
            max_lines=self._config.max_lines,
        )
        return CheckResult(kind, script, CheckOutcome.FAILED, output, duration)


def build_response(report: GateReport | None) -> HookResponse:
    """Turn a gate report into the decision handed to the orchestrator."""
    if report is None or not report.blocked:
        return HookResponse.allow()
    return HookResponse.block([failure.describe() for failure in report.failures])
