"""Hook payload reading and parsing."""

from __future__ import annotations

import json
import logging
import os
import select
import sys
import threading
import time
from typing import Any, TextIO

from gatekeeper.types.hooks import HookPayload

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 65536


def read_stdin(stream: TextIO, timeout: float = 5.0) -> str:
    """Read all of ``stream``, giving up after ``timeout`` seconds.

    Streams backed by a POSIX file descriptor are polled with ``select`` and
    read with ``os.read``, bypassing the buffered reader: a thread parked
    inside ``stream.read()`` would hold the buffer lock and abort the
    interpreter at shutdown. Text received before the deadline is returned
    even if the writer never closes the pipe.

    Other streams (in-memory, Windows) are read on a daemon thread; those
    return an empty string on timeout.
    """
    try:
        fd = stream.fileno()
    except (AttributeError, OSError, ValueError):
        fd = None
    if fd is not None and sys.platform != "win32":
        return _read_fd(fd, timeout)
    return _read_threaded(stream, timeout)


def _read_fd(fd: int, timeout: float) -> str:
    deadline = time.monotonic() + timeout
    chunks: list[bytes] = []
    try:
        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                logger.debug("stdin still open after %ss, continuing", timeout)
                break
            ready, _, _ = select.select([fd], [], [], remaining)
            if not ready:
                continue
            data = os.read(fd, _CHUNK_SIZE)
            if not data:
                break
            chunks.append(data)
    except OSError as exc:
        logger.debug("stdin read failed: %s", exc)
    return b"".join(chunks).decode("utf-8", errors="replace")


def _read_threaded(stream: TextIO, timeout: float) -> str:
    chunks: list[str] = []

    def _reader() -> None:
        try:
            chunks.append(stream.read())
        except (OSError, ValueError) as exc:
            logger.debug("stdin read failed: %s", exc)

    thread = threading.Thread(target=_reader, name="gatekeeper-stdin", daemon=True)
    thread.start()
    thread.join(timeout)
    if thread.is_alive():
        logger.debug("No hook payload within %ss, continuing with defaults", timeout)
        return ""
    return "".join(chunks)


def parse_payload(raw: str) -> HookPayload:
    """Parse the hook's JSON input. Anything unusable becomes an empty payload."""
    data: Any = {}
    if raw.strip():
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.debug("Hook payload is not JSON, ignoring")
            data = {}

    if not isinstance(data, dict):
        data = {}

    session_id = data.get("session_id")
    return HookPayload(
        stop_hook_active=data.get("stop_hook_active") is True,
        session_id=session_id if isinstance(session_id, str) else "",
        raw=data,
    )
