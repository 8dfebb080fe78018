"""Basic text output for non-interactive mode."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from gatekeeper.types.checks import CheckOutcome, GateReport
from gatekeeper.types.project import ProjectProfile

OUTCOME_MARKS: dict[CheckOutcome, str] = {
    CheckOutcome.PASSED: "ok",
    CheckOutcome.FIXED: "fixed",
    CheckOutcome.FAILED: "FAILED",
    CheckOutcome.SKIPPED: "skipped",
}


def print_report(report: GateReport, file: TextIO | None = None) -> None:
    """Print a gate report as plain text."""
    out = file or sys.stdout
    print(f"Project: {report.project_root}", file=out)
    print(f"Package manager: {report.package_manager}", file=out)
    if not report.results:
        print("No lint, type-check or format scripts declared.", file=out)
        return

    for r in report.results:
        mark = OUTCOME_MARKS[r.outcome]
        suffix = "" if r.kind.blocking or not r.failed else " (non-blocking)"
        print(f"  [{mark}] {r.kind.value} ({r.script}) {r.duration_sec:.1f}s{suffix}", file=out)

    for r in report.failures:
        print(file=out)
        print(r.describe(), file=out)

    print(file=out)
    print("Result: BLOCKED" if report.blocked else "Result: OK", file=out)


def print_profile(profile: ProjectProfile, file: TextIO | None = None) -> None:
    """Print a project profile as aligned key/value lines."""
    out = file or sys.stdout
    for key, value in profile_rows(profile):
        print(f"{key + ':':<17} {value}", file=out)


def profile_rows(profile: ProjectProfile) -> list[tuple[str, str]]:
    return [
        ("Project", profile.name or "(unnamed)"),
        ("Root", str(profile.root)),
        ("Package manager", profile.package_manager.value),
        ("Lint", profile.lint_script or "-"),
        ("Type check", profile.type_check_script or "-"),
        ("Format", profile.format_script or "-"),
        ("Framework", profile.framework),
        ("Styling", profile.styling),
    ]


def report_to_dict(report: GateReport) -> dict[str, Any]:
    """JSON-friendly view of a report."""
    return {
        "project_root": str(report.project_root) if report.project_root else None,
        "package_manager": report.package_manager,
        "blocked": report.blocked,
        "checks": [
            {
                "kind": r.kind.value,
                "script": r.script,
                "outcome": r.outcome.value,
                "blocking": r.blocking,
                "duration_sec": round(r.duration_sec, 3),
                "output": r.output,
            }
            for r in report.results
        ],
    }
