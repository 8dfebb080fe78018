"""Diagnostic truncation for long tool output."""

from __future__ import annotations

from gatekeeper.types.checks import CheckKind

MAX_CHARS = 2000
MAX_LINES = 20

LINT_MARKERS: tuple[str, ...] = (
    "error", "Error", "warning", ".ts", ".js", ".tsx", ".jsx", ".svelte",
)
TYPE_CHECK_MARKERS: tuple[str, ...] = (
    "error TS", "Error", ".ts", ".tsx", ".svelte",
)

MARKERS: dict[CheckKind, tuple[str, ...]] = {
    CheckKind.LINT: LINT_MARKERS,
    CheckKind.TYPE_CHECK: TYPE_CHECK_MARKERS,
    CheckKind.FORMAT: LINT_MARKERS,
}


def truncation_suffix(max_lines: int = MAX_LINES) -> str:
    return f"\n\n[Output truncated - showing first {max_lines} relevant lines]"


def is_relevant(line: str, markers: tuple[str, ...]) -> bool:
    return any(marker in line for marker in markers)


def truncate_output(
    text: str,
    markers: tuple[str, ...] = LINT_MARKERS,
    *,
    max_chars: int = MAX_CHARS,
    max_lines: int = MAX_LINES,
) -> str:
    """Shrink ``text`` to its most relevant lines when it exceeds ``max_chars``.

    Text within the cap is returned untouched. Otherwise only lines holding
    one of ``markers`` survive, the first ``max_lines`` of them, cut to
    ``max_chars`` and followed by a truncation notice.
    """
    if len(text) <= max_chars:
        return text

    relevant = [line for line in text.split("\n") if is_relevant(line, markers)]
    kept = "\n".join(relevant[:max_lines])
    if len(kept) > max_chars:
        kept = kept[:max_chars]
    return kept + truncation_suffix(max_lines)
