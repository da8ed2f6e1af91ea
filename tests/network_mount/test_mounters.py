"""
Tests for the platform mounters and PlatformFactory.

The mount commands are never executed for real: create_subprocess_exec is
patched, except where a harmless binary stands in for the mount tool.
"""

import asyncio
from pathlib import Path
from unittest.mock import AsyncMock, Mock, patch

import pytest

from remounter.core.exceptions import MountInvocationError
from remounter.services.network_mount import (
    BaseMounter,
    LinuxMounter,
    MacOSMounter,
    PlatformFactory,
    UnsupportedPlatformError,
)


def fake_process(returncode: int, stderr: bytes = b""):
    process = Mock()
    process.returncode = returncode
    process.communicate = AsyncMock(return_value=(b"", stderr))
    return process


class TestMacOSMounter:

    def test_builds_osascript_mount_volume_command(self):
        cmd = MacOSMounter().build_mount_command("nas.local", Path("/media"))

        assert cmd == ["osascript", "-e", 'mount volume "smb://nas.local/media"']

    @pytest.mark.asyncio
    async def test_successful_mount(self):
        with patch.object(
            asyncio, "create_subprocess_exec", AsyncMock(return_value=fake_process(0))
        ) as exec_mock:
            result = await MacOSMounter().attempt_mount("nas.local", Path("/media"))

        assert result.succeeded is True
        args = exec_mock.await_args.args
        assert args == ("osascript", "-e", 'mount volume "smb://nas.local/media"')

    @pytest.mark.asyncio
    async def test_failed_mount_reports_stderr(self):
        process = fake_process(1, b"execution error: Connection failed. (-43)\n")
        with patch.object(asyncio, "create_subprocess_exec", AsyncMock(return_value=process)):
            result = await MacOSMounter().attempt_mount("nas.local", Path("/media"))

        assert result.succeeded is False
        assert result.returncode == 1
        assert result.stderr == "execution error: Connection failed. (-43)"

    @pytest.mark.asyncio
    async def test_missing_binary_raises_invocation_error(self):
        with patch.object(
            asyncio, "create_subprocess_exec", AsyncMock(side_effect=FileNotFoundError("osascript"))
        ):
            with pytest.raises(MountInvocationError, match="osascript"):
                await MacOSMounter().attempt_mount("nas.local", Path("/media"))


class TestLinuxMounter:

    def test_mounts_by_mount_point(self):
        cmd = LinuxMounter().build_mount_command("nas.local", Path("/mnt/media"))

        assert cmd == ["mount", "/mnt/media"]

    @pytest.mark.asyncio
    async def test_runs_real_subprocess_and_captures_stderr(self):
        class FailingMounter(LinuxMounter):
            def build_mount_command(self, server, share_path):
                return ["sh", "-c", "echo nope >&2; exit 32"]

        result = await FailingMounter().attempt_mount("nas.local", Path("/mnt/media"))

        assert result.returncode == 32
        assert result.stderr == "nope"


class TestPlatformFactory:

    @pytest.mark.parametrize(
        "system, expected",
        [("Darwin", "macos"), ("Linux", "linux")],
    )
    def test_detect_platform(self, system, expected):
        with patch("platform.system", return_value=system):
            assert PlatformFactory().detect_platform() == expected

    def test_unsupported_platform(self):
        with patch("platform.system", return_value="Windows"):
            with pytest.raises(UnsupportedPlatformError):
                PlatformFactory().create_mounter()

    @pytest.mark.parametrize(
        "system, mounter_class",
        [("Darwin", MacOSMounter), ("Linux", LinuxMounter)],
    )
    def test_create_mounter(self, system, mounter_class):
        with patch("platform.system", return_value=system):
            mounter = PlatformFactory().create_mounter()

        assert isinstance(mounter, mounter_class)
        assert isinstance(mounter, BaseMounter)
