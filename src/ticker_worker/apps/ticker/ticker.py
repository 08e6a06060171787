"""The cancellable ticker loop.

Count ticks, log each one with the current wall-clock time, and wait a
short interval on the cancellation signal between ticks. The loop checks
the signal before every increment and wakes early from its wait when the
signal is set, so it stops within one interval of being asked to.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from ticker_worker.apps.ticker.exceptions import TickerStateError
from ticker_worker.core.timestamps import format_timestamp, local_now

if TYPE_CHECKING:
    from datetime import datetime

    from ticker_worker.apps.ticker.cancellation import CancellationSignal
    from ticker_worker.core.protocols import Clock, LogSink

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_SECONDS = 0.001
TICK_MESSAGE = "Worker running request number %d at: %s"


class TickerState(Enum):
    """Lifecycle state of a ``CancellableTicker``."""

    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"


class CancellableTicker:
    """Single-shot loop that logs a numbered, timestamped record per tick.

    The tick counter starts at zero and is owned by this instance; it is
    exposed read-only through ``count``. A ticker runs once: after it
    stops, ``run()`` raises ``TickerStateError``.

    Args:
        interval_seconds: Time to wait on the cancellation signal after
            each tick.
        clock: Source of wall-clock time. Defaults to local time with
            its UTC offset.

    """

    def __init__(
        self,
        interval_seconds: float = DEFAULT_INTERVAL_SECONDS,
        clock: Clock | None = None,
    ) -> None:
        """Initialize an idle ticker with a zero counter."""
        if interval_seconds < 0:
            msg = f"interval_seconds must be non-negative, got {interval_seconds}"
            raise ValueError(msg)
        self._interval = interval_seconds
        self._clock: Clock = clock or local_now
        self._count = 0
        self._state = TickerState.IDLE
        self._last_timestamp: datetime | None = None

    @property
    def count(self) -> int:
        """Return the number of completed ticks."""
        return self._count

    @property
    def state(self) -> TickerState:
        """Return the current lifecycle state."""
        return self._state

    @property
    def interval_seconds(self) -> float:
        """Return the wait between ticks, in seconds."""
        return self._interval

    async def run(self, cancel: CancellationSignal, sink: LogSink | None = None) -> None:
        """Tick until ``cancel`` is set.

        Each tick increments the counter, emits one informational record
        to ``sink`` and then waits on ``cancel`` for the configured
        interval. A signal that is already set produces no ticks at all.

        Args:
            cancel: Cancellation signal supplied by the host.
            sink: Receiver for tick records. Defaults to this module's logger.

        Raises:
            TickerStateError: If the ticker has already been started.

        """
        if self._state is not TickerState.IDLE:
            raise TickerStateError(self._state.name)
        log_sink: LogSink = sink if sink is not None else logger

        self._state = TickerState.RUNNING
        try:
            while not cancel.is_cancelled:
                self._count += 1
                log_sink.info(TICK_MESSAGE, self._count, format_timestamp(self._now()))
                if await cancel.wait(self._interval):
                    break
        finally:
            self._state = TickerState.STOPPED

    def _now(self) -> datetime:
        """Read the clock, never going back past the last emitted timestamp."""
        now = self._clock()
        if self._last_timestamp is not None and now < self._last_timestamp:
            now = self._last_timestamp
        self._last_timestamp = now
        return now
