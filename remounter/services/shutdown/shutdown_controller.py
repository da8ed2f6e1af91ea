import asyncio
import logging
import signal
from typing import List, Optional


class ShutdownToken:
    """
    Cooperative cancellation flag shared between signal handlers and the monitor loop.

    Set at most once and never reset. The loop checks it between iterations, so
    work already in progress always runs to completion.
    """

    def __init__(self):
        self._event = asyncio.Event()

    def is_set(self) -> bool:
        return self._event.is_set()

    def request(self) -> None:
        self._event.set()

    async def wait(self, timeout: Optional[float] = None) -> bool:
        """Wait until shutdown is requested or timeout elapses. Returns is_set()."""
        try:
            await asyncio.wait_for(self._event.wait(), timeout=timeout)
        except asyncio.TimeoutError:
            pass
        return self.is_set()


class ShutdownController:
    """Routes SIGINT and SIGTERM into a ShutdownToken."""

    SIGNALS = (signal.SIGINT, signal.SIGTERM)

    def __init__(self, token: ShutdownToken):
        self._token = token
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._loop_handlers: List[signal.Signals] = []
        self._previous_handlers = {}

    @property
    def token(self) -> ShutdownToken:
        return self._token

    def install(self) -> None:
        """Register the handlers on the running loop."""
        self._loop = asyncio.get_running_loop()
        for sig in self.SIGNALS:
            try:
                self._loop.add_signal_handler(sig, self._on_signal, sig)
                self._loop_handlers.append(sig)
            except NotImplementedError:
                # Loops without add_signal_handler (Windows) get a plain handler
                self._previous_handlers[sig] = signal.signal(sig, self._on_raw_signal)
        logging.debug("Registered shutdown handlers for SIGINT and SIGTERM")

    def uninstall(self) -> None:
        if self._loop is not None:
            for sig in self._loop_handlers:
                self._loop.remove_signal_handler(sig)
        for sig, previous in self._previous_handlers.items():
            signal.signal(sig, previous)
        self._loop_handlers.clear()
        self._previous_handlers.clear()
        self._loop = None

    def __enter__(self) -> "ShutdownController":
        self.install()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.uninstall()

    def _on_raw_signal(self, signum, _frame) -> None:
        self._loop.call_soon_threadsafe(self._on_signal, signal.Signals(signum))

    def _on_signal(self, sig: signal.Signals) -> None:
        if self._token.is_set():
            logging.debug(f"Received {sig.name} again, shutdown already requested")
            return
        logging.info(f"Received {sig.name}, stopping after the current iteration")
        self._token.request()
