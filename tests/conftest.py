"""
Pytest configuration og shared fixtures.
"""

from typing import Iterable, List
from unittest.mock import AsyncMock, Mock

import pytest

from remounter.models import Endpoint, MountCommandResult, ShareSpec, Target
from remounter.services.network_mount.base_mounter import BaseMounter
from remounter.services.remount.hook_runner import HookRunner


class ScriptedProbe:
    """Probe double that replays a fixed sequence of reachability results."""

    def __init__(self, results: Iterable[bool], on_exhausted=None, on_last=None):
        self._results: List[bool] = list(results)
        self._on_exhausted = on_exhausted
        self._on_last = on_last  # called when the final scripted result is returned
        self.calls = 0

    async def is_up(self, endpoint: Endpoint) -> bool:
        self.calls += 1
        if not self._results:
            if self._on_exhausted is not None:
                self._on_exhausted()
            return False
        result = self._results.pop(0)
        if not self._results and self._on_last is not None:
            self._on_last()
        return result


@pytest.fixture
def target():
    return Target(hostname="nas.local", endpoint=Endpoint(address="192.0.2.10", port=445))


@pytest.fixture
def share_root(tmp_path):
    """Directory under which share mount points are created (or not)."""
    return tmp_path


@pytest.fixture
def shares(share_root):
    return ShareSpec(host="nas.local", paths=(share_root / "a", share_root / "b"))


@pytest.fixture
def mock_mounter():
    """Mounter whose mount command always succeeds."""
    mounter = Mock(spec=BaseMounter)
    mounter.attempt_mount = AsyncMock(return_value=MountCommandResult(returncode=0))
    mounter.get_platform_name = Mock(return_value="Test")
    return mounter


@pytest.fixture
def mock_hook_runner():
    runner = Mock(spec=HookRunner)
    runner.run = AsyncMock(return_value=0)
    return runner
