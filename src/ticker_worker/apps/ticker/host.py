"""Process host for the ticker worker.

Own the process-level lifecycle around a ``CancellableTicker``: translate
SIGINT/SIGTERM into the cancellation signal, log startup and shutdown,
and optionally stop after a fixed run duration.
"""

from __future__ import annotations

import asyncio
import logging
import signal
from typing import TYPE_CHECKING

from ticker_worker.apps.ticker.cancellation import CancellationSignal
from ticker_worker.apps.ticker.ticker import CancellableTicker

if TYPE_CHECKING:
    from ticker_worker.apps.ticker.config import TickerConfig
    from ticker_worker.core.protocols import LogSink

logger = logging.getLogger(__name__)

_SHUTDOWN_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class WorkerHost:
    """Run a ticker until a process signal or the configured duration.

    Args:
        config: Immutable ticker configuration.
        ticker: Ticker to run. Built from ``config`` when omitted.
        cancel: Cancellation signal shared with the ticker.
        sink: Log sink passed through to the ticker.
        install_signal_handlers: Register SIGINT/SIGTERM handlers on the
            running loop.

    """

    def __init__(
        self,
        config: TickerConfig,
        ticker: CancellableTicker | None = None,
        cancel: CancellationSignal | None = None,
        sink: LogSink | None = None,
        *,
        install_signal_handlers: bool = True,
    ) -> None:
        """Initialize the host without starting anything."""
        self._config = config
        self._ticker = ticker or CancellableTicker(interval_seconds=config.interval_seconds)
        self._cancel = cancel or CancellationSignal()
        self._sink = sink
        self._install_signal_handlers = install_signal_handlers
        self._installed_signals: list[signal.Signals] = []

    @property
    def ticker(self) -> CancellableTicker:
        """Return the hosted ticker."""
        return self._ticker

    @property
    def cancellation(self) -> CancellationSignal:
        """Return the cancellation signal shared with the ticker."""
        return self._cancel

    async def run(self) -> int:
        """Run the ticker to completion and return its tick count.

        Steps:
            1. Register SIGINT/SIGTERM handlers that call ``stop()``.
            2. Schedule ``stop()`` after ``run_seconds`` if configured.
            3. Await the ticker until cancellation is observed.
            4. Remove handlers and the timer, log the shutdown.

        Returns:
            Number of ticks completed.

        """
        loop = asyncio.get_running_loop()
        if self._install_signal_handlers:
            self._add_signal_handlers(loop)

        logger.info("Application started. Press Ctrl+C to shut down.")
        logger.info("Hosting environment: %s", self._config.environment)

        timer: asyncio.TimerHandle | None = None
        if self._config.run_seconds is not None:
            timer = loop.call_later(self._config.run_seconds, self.stop)

        try:
            await self._ticker.run(self._cancel, self._sink)
        finally:
            if timer is not None:
                timer.cancel()
            self._remove_signal_handlers(loop)
            logger.info("Application is shutting down...")
            logger.info("Ticker stopped after %d ticks", self._ticker.count)
        return self._ticker.count

    def stop(self) -> None:
        """Request shutdown. Calls after the first have no effect."""
        if self._cancel.is_cancelled:
            return
        logger.info("Shutdown requested")
        self._cancel.cancel()

    def _handle_signal(self, signum: signal.Signals) -> None:
        """Translate a process signal into a shutdown request."""
        logger.info("Received %s", signum.name)
        self.stop()

    def _add_signal_handlers(self, loop: asyncio.AbstractEventLoop) -> None:
        """Register shutdown handlers where the loop supports them."""
        for signum in _SHUTDOWN_SIGNALS:
            try:
                loop.add_signal_handler(signum, self._handle_signal, signum)
            except (NotImplementedError, RuntimeError):
                logger.debug("Signal handlers unavailable for %s", signum.name)
                continue
            self._installed_signals.append(signum)

    def _remove_signal_handlers(self, loop: asyncio.AbstractEventLoop) -> None:
        """Remove every handler registered by ``_add_signal_handlers``."""
        for signum in self._installed_signals:
            loop.remove_signal_handler(signum)
        self._installed_signals.clear()
