"""Rich-powered terminal output."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from gatekeeper.cli.output import profile_rows
from gatekeeper.types.checks import CheckOutcome, GateReport
from gatekeeper.types.project import ProjectProfile

# ── Palette ──────────────────────────────────────────────────────────────────

OUTCOME_STYLES: dict[CheckOutcome, tuple[str, str]] = {
    CheckOutcome.PASSED: ("✓ passed", "#34d399"),      # green
    CheckOutcome.FIXED: ("✓ fixed", "#34d399"),
    CheckOutcome.FAILED: ("✗ failed", "bold #f87171"),  # red
    CheckOutcome.SKIPPED: ("– skipped", "dim #7c7c8a"),
}

STYLE_LABEL = "bold #94a3b8"      # slate
STYLE_VALUE = "#e2e8f0"           # light
STYLE_ACCENT = "bold #a78bfa"     # violet
STYLE_ERROR_BODY = "#f87171"
STYLE_MUTED = "dim #7c7c8a"


class RichPrinter:
    """Rich-based printer for gate reports and project profiles."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def print_report(self, report: GateReport) -> None:
        c = self._console
        header = Text()
        header.append("Project ", style=STYLE_LABEL)
        header.append(str(report.project_root), style=STYLE_VALUE)
        header.append("  via ", style=STYLE_MUTED)
        header.append(report.package_manager or "?", style=STYLE_ACCENT)
        c.print(header)

        if not report.results:
            c.print(Text("No lint, type-check or format scripts declared.", style=STYLE_MUTED))
            return

        table = Table(show_header=True, header_style=STYLE_LABEL, box=None, padding=(0, 2))
        table.add_column("Check")
        table.add_column("Script", style=STYLE_MUTED)
        table.add_column("Outcome")
        table.add_column("Time", justify="right", style=STYLE_MUTED)
        for r in report.results:
            label, style = OUTCOME_STYLES[r.outcome]
            if r.failed and not r.kind.blocking:
                label += " (non-blocking)"
            table.add_row(r.kind.value, r.script, Text(label, style=style), f"{r.duration_sec:.1f}s")
        c.print(table)

        for r in report.failures:
            c.print(Panel(
                Text(r.output, style=STYLE_ERROR_BODY),
                title=Text(r.kind.label, style="bold #f87171"),
                title_align="left",
                border_style="#f87171",
            ))

        if report.blocked:
            c.print(Text("✗ Blocked", style="bold #f87171"))
        else:
            c.print(Text("✓ All checks passed", style="bold #34d399"))

    def print_profile(self, profile: ProjectProfile) -> None:
        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column(style=STYLE_LABEL)
        table.add_column(style=STYLE_VALUE)
        for key, value in profile_rows(profile):
            table.add_row(key, value)
        self._console.print(table)
