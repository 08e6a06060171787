"""Cancellable background ticker service."""

__version__ = "0.1.0"
