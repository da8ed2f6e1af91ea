import asyncio
import logging

from ...config import PROBE_TIMEOUT_SECONDS
from ...models import Endpoint


class ReachabilityProbe:
    """Point-in-time TCP connect check against an endpoint."""

    def __init__(self, timeout_seconds: float = PROBE_TIMEOUT_SECONDS):
        self.timeout_seconds = timeout_seconds

    async def is_up(self, endpoint: Endpoint) -> bool:
        """True if a TCP connection could be opened within the timeout."""
        try:
            _, writer = await asyncio.wait_for(
                asyncio.open_connection(endpoint.host, endpoint.port),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError:
            logging.debug(f"Connect to {endpoint} timed out after {self.timeout_seconds}s")
            return False
        except OSError as e:
            logging.debug(f"Connect to {endpoint} failed: {e}")
            return False

        writer.close()
        try:
            await writer.wait_closed()
        except OSError:
            pass
        return True
