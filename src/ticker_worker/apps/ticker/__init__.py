"""Cancellable ticker worker.

Run a single loop that counts ticks, logs each one with the current
wall-clock time, and waits a short interval on a cancellation signal.
The host wires process signals to that cancellation signal so the
service stops promptly on SIGINT/SIGTERM.
"""

from ticker_worker.apps.ticker.cancellation import CancellationSignal
from ticker_worker.apps.ticker.exceptions import TickerError, TickerStateError
from ticker_worker.apps.ticker.ticker import CancellableTicker, TickerState

__all__ = [
    "CancellableTicker",
    "CancellationSignal",
    "TickerError",
    "TickerState",
    "TickerStateError",
]
