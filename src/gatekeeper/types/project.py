"""Project inspection types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class PackageManager(Enum):
    """Package-manager front-ends the gate can drive."""

    PNPM = "pnpm"
    YARN = "yarn"
    NPM = "npm"
    BUN = "bun"

    def run_args(self, script: str, extra: list[str] | tuple[str, ...] = ()) -> list[str]:
        """Argument list (without the binary) that runs ``script``.

        npm needs ``--`` to forward arguments to the script; the others
        forward trailing arguments directly.
        """
        args = ["run", script]
        if extra:
            if self is PackageManager.NPM:
                args.append("--")
            args.extend(extra)
        return args


# Lock files in detection priority order
LOCK_FILES: tuple[tuple[str, PackageManager], ...] = (
    ("pnpm-lock.yaml", PackageManager.PNPM),
    ("yarn.lock", PackageManager.YARN),
    ("package-lock.json", PackageManager.NPM),
    ("bun.lockb", PackageManager.BUN),
    ("bun.lock", PackageManager.BUN),
)


@dataclass(frozen=True, slots=True)
class ProjectManifest:
    """Read-only view of a ``package.json``."""

    path: Path
    name: str = ""
    scripts: dict[str, str] = field(default_factory=dict)
    dependencies: frozenset[str] = frozenset()

    @property
    def root(self) -> Path:
        return self.path.parent

    def first_script(self, names: tuple[str, ...]) -> str | None:
        """Return the first of ``names`` declared as a script."""
        for name in names:
            if name in self.scripts:
                return name
        return None


@dataclass(frozen=True, slots=True)
class ProjectProfile:
    """Summary of a project as reported by ``gatekeeper detect``."""

    root: Path
    name: str
    package_manager: PackageManager
    lint_script: str | None = None
    type_check_script: str | None = None
    format_script: str | None = None
    framework: str = "unknown"
    styling: str = "unknown"
