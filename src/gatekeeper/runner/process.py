"""ProcessRunner: external commands via asyncio subprocesses."""

from __future__ import annotations

import asyncio
import logging
import os
import shutil
import signal
import sys
import time

from gatekeeper.runner.executor import CommandResult, CommandRunner

logger = logging.getLogger(__name__)


class ProcessRunner(CommandRunner):
    """Spawn commands directly (no shell) with a wall-clock timeout.

    On POSIX each command gets its own session so a timeout can kill the
    whole tree (package managers spawn the real tool as a grandchild).
    """

    async def run(
        self,
        command: str,
        args: list[str] | tuple[str, ...] = (),
        *,
        cwd: str | None = None,
        timeout: float = 120.0,
    ) -> CommandResult:
        display = " ".join([command, *args])
        executable = shutil.which(command)
        if executable is None:
            logger.debug("Command not found: %s", command)
            return CommandResult(exit_code=-1, error=f"Command not found: {command}")

        started = time.monotonic()
        try:
            proc = await asyncio.create_subprocess_exec(
                executable,
                *args,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=cwd,
                start_new_session=sys.platform != "win32",
            )
        except OSError as exc:
            return CommandResult(
                exit_code=-1, error=f"Failed to start process: {exc}",
            )

        try:
            stdout_bytes, stderr_bytes = await asyncio.wait_for(
                proc.communicate(), timeout=timeout,
            )
        except TimeoutError:
            _kill_tree(proc)
            try:
                await proc.wait()
            except ProcessLookupError:
                pass
            logger.debug("Timed out after %ss: %s", timeout, display)
            return CommandResult(
                exit_code=-1,
                timed_out=True,
                error=f"Command timed out after {timeout}s: {display}",
                duration_sec=time.monotonic() - started,
            )

        elapsed = time.monotonic() - started
        exit_code = proc.returncode if proc.returncode is not None else 0
        logger.debug("%s -> exit %d (%.2fs)", display, exit_code, elapsed)

        return CommandResult(
            exit_code=exit_code,
            stdout=_decode(stdout_bytes),
            stderr=_decode(stderr_bytes),
            duration_sec=elapsed,
        )


def _decode(data: bytes | None) -> str:
    return data.decode("utf-8", errors="replace") if data else ""


def _kill_tree(proc: asyncio.subprocess.Process) -> None:
    try:
        if sys.platform != "win32":
            os.killpg(proc.pid, signal.SIGKILL)
        else:
            proc.kill()
    except (ProcessLookupError, PermissionError):
        pass
