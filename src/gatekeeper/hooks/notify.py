"""Audible notification hook (tool use, notifications, session stop)."""

from __future__ import annotations

import logging
import platform
import shutil
import subprocess
import sys
from collections.abc import Callable
from enum import Enum

logger = logging.getLogger(__name__)


class SoundType(Enum):
    TOOL = "tool"
    NOTIFY = "notify"
    STOP = "stop"

    @classmethod
    def from_name(cls, name: str | None) -> SoundType:
        """Parse a sound type, treating anything unknown as TOOL."""
        try:
            return cls(name)
        except ValueError:
            return cls.TOOL


class Platform(Enum):
    WSL = "wsl"
    MACOS = "macos"
    LINUX = "linux"
    UNKNOWN = "unknown"


WINDOWS_MEDIA = "C:\\Windows\\Media"
WSL_SOUNDS: dict[SoundType, str] = {
    SoundType.TOOL: "ding.wav",
    SoundType.NOTIFY: "Windows Notify.wav",
    SoundType.STOP: "chimes.wav",
}
MACOS_SOUNDS: dict[SoundType, str] = {
    SoundType.TOOL: "/System/Library/Sounds/Pop.aiff",
    SoundType.NOTIFY: "/System/Library/Sounds/Glass.aiff",
    SoundType.STOP: "/System/Library/Sounds/Purr.aiff",
}
FREEDESKTOP_SOUNDS: dict[SoundType, str] = {
    SoundType.TOOL: "/usr/share/sounds/freedesktop/stereo/message.oga",
    SoundType.NOTIFY: "/usr/share/sounds/freedesktop/stereo/complete.oga",
    SoundType.STOP: "/usr/share/sounds/freedesktop/stereo/bell.oga",
}
# (seconds, frequency Hz) for sox-generated beeps
SYNTH_TONES: dict[SoundType, tuple[str, str]] = {
    SoundType.TOOL: ("0.1", "880"),
    SoundType.NOTIFY: ("0.2", "660"),
    SoundType.STOP: ("0.3", "440"),
}


def detect_platform(system: str | None = None, release: str | None = None) -> Platform:
    system = system if system is not None else platform.system()
    release = release if release is not None else platform.release()
    if "microsoft" in release.lower() or "WSL" in release:
        return Platform.WSL
    if system == "Darwin":
        return Platform.MACOS
    if system == "Linux":
        return Platform.LINUX
    return Platform.UNKNOWN


def resolve_sound_command(
    sound: SoundType,
    plat: Platform,
    which: Callable[[str], str | None] = shutil.which,
) -> list[str] | None:
    """Command that plays ``sound`` on ``plat``, or None if nothing can."""
    match plat:
        case Platform.WSL:
            wav = f"{WINDOWS_MEDIA}\\{WSL_SOUNDS[sound]}"
            return [
                "powershell.exe", "-Command",
                f"(New-Object Media.SoundPlayer '{wav}').PlaySync()",
            ]
        case Platform.MACOS:
            return ["afplay", MACOS_SOUNDS[sound]]
        case Platform.LINUX:
            if which("paplay"):
                return ["paplay", FREEDESKTOP_SOUNDS[sound]]
            if which("aplay") and which("play"):
                seconds, freq = SYNTH_TONES[sound]
                return ["play", "-n", "synth", seconds, "sine", freq]
            return None
        case _:
            return None


def play_sound(
    sound: SoundType,
    *,
    plat: Platform | None = None,
    which: Callable[[str], str | None] = shutil.which,
) -> list[str] | None:
    """Start playing ``sound`` in the background and return the command used.

    Never raises: a missing player is logged and ignored. On unknown
    platforms a terminal bell is written to stderr instead.
    """
    plat = plat or detect_platform()
    if plat is Platform.UNKNOWN:
        sys.stderr.write("\a")
        sys.stderr.flush()
        return None

    command = resolve_sound_command(sound, plat, which)
    if command is None:
        logger.debug("No sound player available on %s", plat.value)
        return None

    try:
        subprocess.Popen(
            command,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as exc:
        logger.debug("Could not start %s: %s", command[0], exc)
        return None
    return command
