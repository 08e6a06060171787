"""Exceptions for the ticker worker."""


class TickerError(Exception):
    """Base exception for ticker errors."""


class TickerStateError(TickerError):
    """Operation not allowed in the ticker's current lifecycle state.

    A ticker runs at most once; construct a new instance to run again.
    """

    def __init__(self, state: str) -> None:
        """Initialize the state error.

        Args:
            state: Name of the state the ticker was in.

        """
        super().__init__(f"Ticker cannot be started from state {state}")
        self.state = state
