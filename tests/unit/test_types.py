"""Tests for result, report and hook response types."""

from __future__ import annotations

import io
import json
from pathlib import Path

from rich.console import Console

from gatekeeper.cli.output import print_report, report_to_dict
from gatekeeper.types.checks import CheckKind, CheckOutcome, CheckResult, GateReport
from gatekeeper.types.hooks import BLOCK_PREAMBLE, HookResponse
from gatekeeper.ui.terminal import RichPrinter


def _report(*results: CheckResult) -> GateReport:
    return GateReport(project_root=Path("/work/app"), package_manager="npm", results=list(results))


class TestCheckResult:
    def test_failed_lint_blocks(self):
        r = CheckResult(CheckKind.LINT, "lint", CheckOutcome.FAILED, "a.ts: error")
        assert r.blocking
        assert r.describe() == "ESLint errors found:\na.ts: error"

    def test_empty_output_does_not_block(self):
        assert not CheckResult(CheckKind.TYPE_CHECK, "tsc", CheckOutcome.FAILED, "  \n").blocking

    def test_format_never_blocks(self):
        r = CheckResult(CheckKind.FORMAT, "format", CheckOutcome.FAILED, "boom")
        assert r.failed
        assert not r.blocking

    def test_passed_does_not_block(self):
        assert not CheckResult(CheckKind.LINT, "lint", CheckOutcome.FIXED).blocking


class TestGateReport:
    def test_failures_keep_order(self):
        lint = CheckResult(CheckKind.LINT, "lint", CheckOutcome.FAILED, "l")
        types = CheckResult(CheckKind.TYPE_CHECK, "tsc", CheckOutcome.FAILED, "t")
        report = _report(lint, types)
        assert report.failures == [lint, types]
        assert report.blocked

    def test_empty_report_allows(self):
        assert not GateReport().blocked


class TestHookResponse:
    def test_allow_serializes_to_nothing(self):
        assert HookResponse.allow().to_json() is None

    def test_block_reason_layout(self):
        response = HookResponse.block(["ESLint errors found:\nx", "TypeScript errors found:\ny"])
        data = json.loads(response.to_json())
        assert data == {
            "decision": "block",
            "reason": (
                f"{BLOCK_PREAMBLE}\n\nESLint errors found:\nx\n\nTypeScript errors found:\ny"
            ),
        }


class TestOutput:
    def test_plain_report(self):
        out = io.StringIO()
        print_report(_report(
            CheckResult(CheckKind.LINT, "lint", CheckOutcome.FIXED, duration_sec=1.25),
            CheckResult(CheckKind.FORMAT, "format", CheckOutcome.FAILED, "boom"),
        ), file=out)
        text = out.getvalue()
        assert "  [fixed] lint (lint) 1.2s" in text
        assert "[FAILED] format (format) 0.0s (non-blocking)" in text
        assert "Result: OK" in text
        assert "Formatting failed:" not in text

    def test_plain_report_no_scripts(self):
        out = io.StringIO()
        print_report(_report(), file=out)
        assert "No lint, type-check or format scripts declared." in out.getvalue()

    def test_report_to_dict(self):
        data = report_to_dict(_report(
            CheckResult(CheckKind.TYPE_CHECK, "tsc", CheckOutcome.FAILED, "error TS1", 0.12345),
        ))
        assert data["project_root"] == str(Path("/work/app"))
        assert data["checks"][0] == {
            "kind": "type-check",
            "script": "tsc",
            "outcome": "failed",
            "blocking": True,
            "duration_sec": 0.123,
            "output": "error TS1",
        }

    def test_rich_report(self):
        console = Console(file=io.StringIO(), width=100, color_system=None)
        RichPrinter(console).print_report(_report(
            CheckResult(CheckKind.LINT, "lint", CheckOutcome.FAILED, "src/a.ts  error  no-undef"),
        ))
        text = console.file.getvalue()
        assert "ESLint errors found:" in text
        assert "src/a.ts  error  no-undef" in text
        assert "Blocked" in text
