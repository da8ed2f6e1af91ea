"""Abstract Base Mounter - interface for the single-share mount operation."""

import asyncio
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Sequence

from ...core.exceptions import MountInvocationError
from ...models import MountCommandResult


class BaseMounter(ABC):
    """Abstract base class for platform-specific mount operations."""

    @abstractmethod
    def build_mount_command(self, server: str, share_path: Path) -> Sequence[str]:
        """Command line that mounts share_path from server."""

    @abstractmethod
    def get_platform_name(self) -> str:
        """Get platform name for logging."""

    async def attempt_mount(self, server: str, share_path: Path) -> MountCommandResult:
        """
        Run the mount command and wait for it to finish.

        No timeout is applied: a hanging mount blocks the caller until it returns.

        :raises MountInvocationError: if the command cannot be started at all
        """
        cmd = list(self.build_mount_command(server, share_path))
        logging.debug(f"Executing mount command: {' '.join(cmd)}")

        try:
            process = await asyncio.create_subprocess_exec(
                *cmd, stdout=asyncio.subprocess.PIPE, stderr=asyncio.subprocess.PIPE
            )
        except OSError as e:
            raise MountInvocationError(" ".join(cmd), e) from e

        _, stderr = await process.communicate()
        return MountCommandResult(
            returncode=process.returncode,
            stderr=stderr.decode(errors="replace").strip() if stderr else "",
        )
