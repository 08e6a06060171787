"""Shared test configuration and fixtures."""

import os
from collections.abc import Iterator
from unittest.mock import patch

import pytest

import ticker_worker.core.config as config_module

_TICKER_ENV_VARS = (
    "TICKER_ENVIRONMENT",
    "TICKER_INTERVAL_SECONDS",
    "TICKER_RUN_SECONDS",
)


@pytest.fixture(autouse=True)
def _isolate_ticker_env() -> Iterator[None]:  # pyright: ignore[reportUnusedFunction]
    """Hide ticker settings from the developer's shell and reset the config singleton.

    ``settings.yaml`` reads ``TICKER_*`` variables with defaults, so a value
    exported locally (or loaded from a ``.env`` file) would change what the
    tests see. Strip them for every test and drop any cached ``ConfigLoader``.
    """
    cleaned = {k: v for k, v in os.environ.items() if k not in _TICKER_ENV_VARS}
    config_module._config = None
    with (
        patch.dict(os.environ, cleaned, clear=True),
        patch("ticker_worker.core.config.load_dotenv"),
    ):
        yield
    config_module._config = None
