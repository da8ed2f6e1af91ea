"""Remount Orchestrator - restores every configured share and aggregates the results."""

import logging
from pathlib import Path

import aiofiles.os

from ..network_mount.base_mounter import BaseMounter
from ...models import RemountOutcome, RemountPassResult, RemountStatus, ShareSpec


class RemountOrchestrator:
    """Attempts each share independently. No short-circuit, no rollback, no retry."""

    def __init__(self, mounter: BaseMounter):
        self._mounter = mounter

    async def remount_one(self, shares: ShareSpec, path: Path) -> RemountOutcome:
        if await aiofiles.os.path.exists(path):
            logging.info(f"Share {path} is already mounted, skipping remount")
            return RemountOutcome(path=path, status=RemountStatus.SKIPPED)

        logging.info(f"Remounting {shares.remote_url(path)}")

        # MountInvocationError propagates to the monitor loop
        result = await self._mounter.attempt_mount(shares.host, path)

        if not result.succeeded:
            reason = f"mount command exited with status {result.returncode}"
            if result.stderr:
                reason = f"{reason}: {result.stderr}"
            return RemountOutcome(path=path, status=RemountStatus.FAILED, reason=reason)

        logging.info(f"Mounted {path}")
        return RemountOutcome(path=path, status=RemountStatus.SUCCEEDED)

    async def remount_all(self, shares: ShareSpec) -> RemountPassResult:
        result = RemountPassResult()
        for path in shares.paths:
            result.outcomes.append(await self.remount_one(shares, path))

        for failure in result.failures:
            logging.error(
                f"Error remounting share {failure.path}: {failure.reason}",
                extra={
                    "operation": "remount_failed",
                    "path": str(failure.path),
                    "reason": failure.reason,
                },
            )

        return result
