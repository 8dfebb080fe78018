"""External command execution for Gatekeeper."""

from gatekeeper.runner.executor import CommandResult, CommandRunner, create_runner

__all__ = ["CommandResult", "CommandRunner", "create_runner"]
