"""Cooperative cancellation signal for the ticker loop."""

import asyncio


class CancellationSignal:
    """One-way stop flag that can be awaited with a timeout.

    Wrap ``asyncio.Event`` so that waiting for the next tick and waiting
    for cancellation are the same operation: a timed wait on the signal
    wakes immediately when ``cancel()`` is called. Once set, the signal
    stays set.
    """

    def __init__(self) -> None:
        self._event = asyncio.Event()

    @property
    def is_cancelled(self) -> bool:
        """Whether cancellation has been requested."""
        return self._event.is_set()

    def cancel(self) -> None:
        """Request cancellation. Repeated calls have no further effect."""
        self._event.set()

    async def wait(self, timeout: float) -> bool:
        """Suspend until cancelled or ``timeout`` seconds elapse.

        A non-positive timeout yields to the event loop once.

        Args:
            timeout: Maximum time to wait, in seconds.

        Returns:
            True if cancellation has been requested, False otherwise.

        """
        if timeout <= 0:
            await asyncio.sleep(0)
            return self.is_cancelled
        try:
            await asyncio.wait_for(self._event.wait(), timeout)
        except TimeoutError:
            return False
        return True
