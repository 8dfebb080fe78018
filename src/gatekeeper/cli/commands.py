"""CLI subcommands for Gatekeeper (check, detect, notify, config)."""

from __future__ import annotations

import asyncio
import json
import os
import sys
from pathlib import Path

import click

from gatekeeper.errors import ManifestError


@click.command("check")
@click.option("--cwd", default=None, help="Working directory (default: current)")
@click.option("--rich/--no-rich", "use_rich", default=None, help="Rich output (default: auto)")
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
@click.pass_context
def check_cmd(ctx: click.Context, cwd: str | None, use_rich: bool | None, as_json: bool) -> None:
    """Run the quality gate and print a report.

    Exits 1 when a lint or type check fails, 2 when package.json is invalid.
    """
    from gatekeeper.cli.main import load_effective_config
    from gatekeeper.cli.output import print_report, report_to_dict
    from gatekeeper.core.gate import QualityGate
    from gatekeeper.core.project import find_project_root
    from gatekeeper.runner import create_runner

    start = cwd or os.getcwd()
    root = find_project_root(start)
    if root is None:
        click.echo(f"No package.json found at or above {start}; nothing to check.", err=True)
        return

    config = load_effective_config(ctx, cwd)
    gate = QualityGate(create_runner(), config)
    try:
        report = asyncio.run(gate.evaluate(root))
    except ManifestError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(2)

    if as_json:
        click.echo(json.dumps(report_to_dict(report), indent=2))
    elif use_rich if use_rich is not None else sys.stdout.isatty():
        from gatekeeper.ui.terminal import RichPrinter
        RichPrinter().print_report(report)
    else:
        print_report(report)

    if report.blocked:
        raise SystemExit(1)


@click.command("detect")
@click.option("--cwd", default=None, help="Working directory (default: current)")
@click.option("--rich/--no-rich", "use_rich", default=None, help="Rich output (default: auto)")
@click.pass_context
def detect_cmd(ctx: click.Context, cwd: str | None, use_rich: bool | None) -> None:
    """Show the project root, package manager, check scripts and framework."""
    from gatekeeper.cli.main import load_effective_config
    from gatekeeper.cli.output import print_profile
    from gatekeeper.core.project import detect_profile, find_project_root
    from gatekeeper.runner import create_runner

    start = cwd or os.getcwd()
    root = find_project_root(start)
    if root is None:
        click.echo(f"Error: no package.json found at or above {start}", err=True)
        raise SystemExit(1)

    config = load_effective_config(ctx, cwd)
    try:
        profile = asyncio.run(detect_profile(
            root,
            create_runner(),
            preferred=config.preferred_manager,
            probe_timeout=config.probe_timeout,
        ))
    except ManifestError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    if use_rich if use_rich is not None else sys.stdout.isatty():
        from gatekeeper.ui.terminal import RichPrinter
        RichPrinter().print_profile(profile)
    else:
        print_profile(profile)


@click.command("notify")
@click.argument("sound_type", required=False, default="tool")
def notify_cmd(sound_type: str) -> None:
    """Play a notification sound (tool, notify or stop). Always exits 0."""
    from gatekeeper.hooks.notify import SoundType, play_sound

    play_sound(SoundType.from_name(sound_type))


@click.group()
def config_cmd() -> None:
    """Manage Gatekeeper configuration."""


@config_cmd.command("list")
@click.option("--cwd", default=None, help="Working directory (default: current)")
def config_list(cwd: str | None) -> None:
    """Show the effective configuration."""
    from gatekeeper.core.config import config_as_dict, find_config_file, load_config

    path = find_config_file(cwd)
    click.echo(f"Config file: {path if path else '(none, using defaults)'}")
    for k, v in config_as_dict(load_config(cwd)).items():
        click.echo(f"  {k}: {v}")


@config_cmd.command("init")
@click.option("--write", "write_file", is_flag=True, help="Write .gatekeeper/config.toml here")
def config_init(write_file: bool) -> None:
    """Print (or write) a config template."""
    from gatekeeper.core.config import CONFIG_DIR, CONFIG_FILE, generate_config_template

    template = generate_config_template()
    if not write_file:
        click.echo(template, nl=False)
        return

    path = Path.cwd() / CONFIG_DIR / CONFIG_FILE
    if path.exists():
        click.echo(f"Error: {path} already exists", err=True)
        raise SystemExit(1)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(template)
    click.echo(f"Wrote {path}")
