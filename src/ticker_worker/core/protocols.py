"""Structural protocols for the ticker's external collaborators.

Define the ``LogSink`` and ``Clock`` interfaces that decouple the ticker
loop from concrete logging and time sources. Any object whose shape
matches these protocols can be used without explicit inheritance, so a
plain ``logging.Logger`` is a valid sink.
"""

from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class LogSink(Protocol):
    """Receiver of informational log records.

    Implementors accept a ``%``-style format string and its arguments,
    matching the signature of ``logging.Logger.info``.
    """

    def info(self, msg: str, *args: object) -> None:
        """Record an informational message."""
        ...


@runtime_checkable
class Clock(Protocol):
    """Zero-argument callable returning the current wall-clock time."""

    def __call__(self) -> datetime:
        """Return the current time as an aware datetime."""
        ...
