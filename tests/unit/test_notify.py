"""Tests for the sound notification hook."""

from __future__ import annotations

import subprocess

import pytest

from gatekeeper.hooks import notify
from gatekeeper.hooks.notify import (
    Platform,
    SoundType,
    detect_platform,
    play_sound,
    resolve_sound_command,
)


def _which(*available: str):
    return lambda name: f"/usr/bin/{name}" if name in available else None


class TestSoundType:
    def test_known(self):
        assert SoundType.from_name("stop") is SoundType.STOP

    @pytest.mark.parametrize("name", [None, "", "beep"])
    def test_unknown_defaults_to_tool(self, name):
        assert SoundType.from_name(name) is SoundType.TOOL


class TestDetectPlatform:
    def test_wsl(self):
        assert detect_platform("Linux", "5.15.90.1-microsoft-standard-WSL2") is Platform.WSL

    def test_macos(self):
        assert detect_platform("Darwin", "23.1.0") is Platform.MACOS

    def test_linux(self):
        assert detect_platform("Linux", "6.5.0-generic") is Platform.LINUX

    def test_unknown(self):
        assert detect_platform("Windows", "10") is Platform.UNKNOWN


class TestResolveSoundCommand:
    def test_macos(self):
        assert resolve_sound_command(SoundType.NOTIFY, Platform.MACOS) == [
            "afplay", "/System/Library/Sounds/Glass.aiff",
        ]

    def test_wsl(self):
        cmd = resolve_sound_command(SoundType.STOP, Platform.WSL)
        assert cmd[0] == "powershell.exe"
        assert "chimes.wav" in cmd[-1]

    def test_linux_paplay(self):
        cmd = resolve_sound_command(SoundType.STOP, Platform.LINUX, _which("paplay", "aplay"))
        assert cmd == ["paplay", "/usr/share/sounds/freedesktop/stereo/bell.oga"]

    def test_linux_sox_fallback(self):
        cmd = resolve_sound_command(SoundType.NOTIFY, Platform.LINUX, _which("aplay", "play"))
        assert cmd == ["play", "-n", "synth", "0.2", "sine", "660"]

    def test_linux_nothing_available(self):
        assert resolve_sound_command(SoundType.TOOL, Platform.LINUX, _which("aplay")) is None

    def test_unknown_platform(self):
        assert resolve_sound_command(SoundType.TOOL, Platform.UNKNOWN) is None


class TestPlaySound:
    def test_spawns_detached(self, monkeypatch):
        spawned = []

        class FakePopen:
            def __init__(self, args, **kwargs):
                spawned.append((args, kwargs))

        monkeypatch.setattr(notify.subprocess, "Popen", FakePopen)
        cmd = play_sound(SoundType.TOOL, plat=Platform.MACOS)
        assert cmd == ["afplay", "/System/Library/Sounds/Pop.aiff"]
        args, kwargs = spawned[0]
        assert args == cmd
        assert kwargs["start_new_session"] is True
        assert kwargs["stdout"] is subprocess.DEVNULL

    def test_spawn_error_swallowed(self, monkeypatch):
        def boom(*args, **kwargs):
            raise FileNotFoundError("afplay")

        monkeypatch.setattr(notify.subprocess, "Popen", boom)
        assert play_sound(SoundType.TOOL, plat=Platform.MACOS) is None

    def test_unknown_platform_rings_bell(self, capsys):
        assert play_sound(SoundType.STOP, plat=Platform.UNKNOWN) is None
        assert capsys.readouterr().err == "\a"

    def test_no_player(self, monkeypatch):
        monkeypatch.setattr(notify.subprocess, "Popen", pytest.fail)
        assert play_sound(SoundType.TOOL, plat=Platform.LINUX, which=_which()) is None
