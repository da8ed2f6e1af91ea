import logging
from typing import Optional

from .connection_state import ConnectionStateTracker
from .reachability_probe import ReachabilityProbe
from ..remount.hook_runner import HookRunner
from ..remount.remount_orchestrator import RemountOrchestrator
from ..shutdown.shutdown_controller import ShutdownToken
from ...config import POLL_INTERVAL_SECONDS
from ...models import RemountPassResult, ShareSpec, Target, Transition


class ConnectivityMonitor:
    """
    Polls the target and remounts the shares on every Down -> Up edge.

    The state machine latches Up as soon as the edge is seen, before the remount
    pass runs. A failed pass is therefore not retried while the host stays
    reachable; the next attempt happens only after the link goes Down and Up
    again.
    """

    def __init__(
        self,
        target: Target,
        shares: ShareSpec,
        orchestrator: RemountOrchestrator,
        shutdown_token: ShutdownToken,
        probe: Optional[ReachabilityProbe] = None,
        hook_runner: Optional[HookRunner] = None,
        post_mount_script: Optional[str] = None,
        poll_interval_seconds: float = POLL_INTERVAL_SECONDS,
    ):
        self._target = target
        self._shares = shares
        self._orchestrator = orchestrator
        self._shutdown_token = shutdown_token
        self._probe = probe or ReachabilityProbe()
        self._hook_runner = hook_runner or HookRunner()
        self._post_mount_script = post_mount_script
        self._poll_interval_seconds = poll_interval_seconds

        self._state = ConnectionStateTracker()

    @property
    def state(self) -> ConnectionStateTracker:
        return self._state

    async def run(self) -> None:
        """Poll until shutdown is requested. Invocation errors propagate."""
        logging.info(
            f"Monitoring {self._target} ({self._target.endpoint.address}) "
            f"every {self._poll_interval_seconds:g}s"
        )

        while not self._shutdown_token.is_set():
            await self.poll_once()
            await self._shutdown_token.wait(self._poll_interval_seconds)

        logging.info("Termination signal received, exiting...")

    async def poll_once(self) -> Optional[RemountPassResult]:
        """One probe plus any transition handling. Returns the pass result on an Up edge."""
        is_up = await self._probe.is_up(self._target.endpoint)
        transition = self._state.observe(is_up)

        if transition == Transition.UP:
            return await self._handle_up()
        if transition == Transition.DOWN:
            logging.info(
                f"{self._target} is down, will attempt to remount when it is back up",
                extra={"operation": "connection_down", "target": str(self._target)},
            )
        return None

    async def _handle_up(self) -> RemountPassResult:
        logging.info(
            f"{self._target} is up, attempting to remount...",
            extra={"operation": "connection_up", "target": str(self._target)},
        )

        result = await self._orchestrator.remount_all(self._shares)
        if not result.succeeded:
            logging.error(
                f"Remount failed: {len(result.failures)} of {len(result.outcomes)} "
                f"shares failed to remount"
            )
            return result

        logging.info("Remount successful")

        if self._post_mount_script:
            await self._hook_runner.run(self._post_mount_script)

        return result
