"""Project discovery: manifest, package manager and framework profile."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from gatekeeper.errors import ManifestError
from gatekeeper.runner.executor import CommandRunner
from gatekeeper.types.project import (
    LOCK_FILES,
    PackageManager,
    ProjectManifest,
    ProjectProfile,
)

logger = logging.getLogger(__name__)

MANIFEST_NAME = "package.json"

# Script aliases, highest priority first
LINT_SCRIPTS = ("lint", "eslint")
TYPE_CHECK_SCRIPTS = ("type-check", "typecheck", "tsc")
FORMAT_SCRIPTS = ("prettier", "format")

DEFAULT_MANAGER = PackageManager.NPM

# (dependency, framework) in detection priority order
FRAMEWORKS: tuple[tuple[str, str], ...] = (
    ("svelte", "svelte"),
    ("@sveltejs/kit", "svelte"),
    ("next", "nextjs"),
    ("react", "react"),
    ("vue", "vue"),
)
STYLING: tuple[tuple[str, str], ...] = (
    ("tailwindcss", "tailwind"),
)


def find_project_root(start: str | Path) -> Path | None:
    """Return the nearest directory at or above ``start`` holding a manifest."""
    current = Path(start).resolve()
    for directory in (current, *current.parents):
        if (directory / MANIFEST_NAME).is_file():
            return directory
    return None


def load_manifest(root: str | Path) -> ProjectManifest:
    """Read ``package.json`` from ``root``.

    Raises ManifestError if the file is unreadable or not a JSON object.
    Script entries that are not strings are dropped.
    """
    path = Path(root) / MANIFEST_NAME
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestError(f"Cannot read {path}: {exc}", path) from exc
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Invalid JSON in {path}: {exc}", path) from exc

    if not isinstance(data, dict):
        raise ManifestError(f"{path} does not contain a JSON object", path)

    scripts_raw = data.get("scripts")
    scripts: dict[str, str] = {}
    if isinstance(scripts_raw, dict):
        scripts = {k: v for k, v in scripts_raw.items() if isinstance(v, str)}

    deps: set[str] = set()
    for section in ("dependencies", "devDependencies"):
        deps.update(_dict_keys(data.get(section)))

    name = data.get("name")
    return ProjectManifest(
        path=path,
        name=name if isinstance(name, str) else "",
        scripts=scripts,
        dependencies=frozenset(deps),
    )


def _dict_keys(value: Any) -> list[str]:
    if isinstance(value, dict):
        return [k for k in value if isinstance(k, str)]
    return []


def lock_file_manager(root: str | Path) -> PackageManager | None:
    """Package manager implied by a lock file in ``root``, if any."""
    root = Path(root)
    for lock_file, manager in LOCK_FILES:
        if (root / lock_file).exists():
            return manager
    return None


async def detect_package_manager(
    root: str | Path,
    runner: CommandRunner,
    *,
    preferred: str = "pnpm",
    probe_timeout: float = 10.0,
) -> PackageManager:
    """Pick the package manager that owns the project.

    Lock files win. Without one the preferred binary is probed with
    ``--version``; a failed probe falls through to npm.
    """
    manager = lock_file_manager(root)
    if manager is not None:
        logger.debug("Lock file selects %s", manager.value)
        return manager

    try:
        candidate = PackageManager(preferred)
    except ValueError:
        logger.warning("Unknown preferred package manager '%s', using npm", preferred)
        return DEFAULT_MANAGER

    result = await runner.run(
        candidate.value, ["--version"], cwd=str(root), timeout=probe_timeout,
    )
    if result.ok:
        logger.debug("Probe selects %s", candidate.value)
        return candidate

    logger.debug("%s not available, defaulting to %s", candidate.value, DEFAULT_MANAGER.value)
    return DEFAULT_MANAGER


def detect_framework(manifest: ProjectManifest) -> str:
    for dependency, framework in FRAMEWORKS:
        if dependency in manifest.dependencies:
            return framework
    return "unknown"


def detect_styling(manifest: ProjectManifest) -> str:
    for dependency, styling in STYLING:
        if dependency in manifest.dependencies:
            return styling
    return "unknown"


async def detect_profile(
    root: str | Path,
    runner: CommandRunner,
    *,
    preferred: str = "pnpm",
    probe_timeout: float = 10.0,
) -> ProjectProfile:
    """Build a ProjectProfile for the project at ``root``."""
    manifest = load_manifest(root)
    manager = await detect_package_manager(
        root, runner, preferred=preferred, probe_timeout=probe_timeout,
    )
    return ProjectProfile(
        root=Path(root),
        name=manifest.name,
        package_manager=manager,
        lint_script=manifest.first_script(LINT_SCRIPTS),
        type_check_script=manifest.first_script(TYPE_CHECK_SCRIPTS),
        format_script=manifest.first_script(FORMAT_SCRIPTS),
        framework=detect_framework(manifest),
        styling=detect_styling(manifest),
    )
