"""CLI entry point for Gatekeeper."""

from __future__ import annotations

import asyncio
import logging
import os

import click
from rich.console import Console
from rich.logging import RichHandler

from gatekeeper.core.config import load_config
from gatekeeper.core.project import find_project_root
from gatekeeper.hooks.events import read_stdin
from gatekeeper.hooks.stop import run_stop_hook
from gatekeeper.types.config import GateConfig
from gatekeeper.types.hooks import HookResponse

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr; stdout belongs to the hook protocol."""
    root = logging.getLogger("gatekeeper")
    root.handlers.clear()
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
    )
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)


def load_effective_config(ctx: click.Context, cwd: str | None) -> GateConfig:
    """Load config for the project enclosing ``cwd`` and apply its log level."""
    start = cwd or os.getcwd()
    config = load_config(find_project_root(start) or start)
    if not ctx.find_root().params.get("verbose"):
        level = logging.getLevelName(config.log_level.upper())
        if isinstance(level, int):
            logging.getLogger("gatekeeper").setLevel(level)
        else:
            logger.warning("Unknown log_level '%s' in config", config.log_level)
    return config


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Debug logging on stderr")
@click.version_option(package_name="gatekeeper")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Gatekeeper -- quality gate and hooks for AI coding sessions.

    \b
    Usage:
      gatekeeper stop            (stop hook: JSON on stdin)
      gatekeeper check           (run the gate and show a report)
      gatekeeper detect
      gatekeeper notify stop
      gatekeeper config list
    """
    configure_logging(verbose)
    ctx.ensure_object(dict)


@cli.command("stop")
@click.option("--cwd", default=None, help="Working directory (default: current)")
@click.pass_context
def stop_cmd(ctx: click.Context, cwd: str | None) -> None:
    """Stop hook: block completion while lint or type errors remain.

    Reads the hook payload from stdin and prints a block decision as JSON
    when checks fail. Always exits 0.
    """
    try:
        config = load_effective_config(ctx, cwd)
        raw = read_stdin(click.get_text_stream("stdin"), timeout=config.stdin_timeout)
        response = asyncio.run(run_stop_hook(raw, cwd or os.getcwd(), config=config))
    except Exception:
        logger.exception("Stop hook failed, allowing")
        response = HookResponse.allow()

    line = response.to_json()
    if line is not None:
        click.echo(line)


def _register_subcommands() -> None:
    """Register CLI subcommands."""
    from gatekeeper.cli.commands import check_cmd, config_cmd, detect_cmd, notify_cmd

    cli.add_command(check_cmd, "check")
    cli.add_command(detect_cmd, "detect")
    cli.add_command(notify_cmd, "notify")
    cli.add_command(config_cmd, "config")


_register_subcommands()


def main() -> None:
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()
