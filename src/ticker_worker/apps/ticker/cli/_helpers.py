"""Shared helpers for ticker CLI commands.

Centralise logging setup and configuration resolution so every command
starts the service the same way.
"""

import logging
from dataclasses import replace
from pathlib import Path

from ticker_worker.apps.ticker.config import TickerConfig
from ticker_worker.core.config import ConfigLoader, get_config

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(*, verbose: bool) -> None:
    """Configure root logging for a CLI run.

    Args:
        verbose: Enable DEBUG output instead of INFO.

    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format=_LOG_FORMAT, datefmt=_DATE_FORMAT)


def resolve_config(
    *,
    config_dir: Path | None = None,
    interval: float | None = None,
    duration: float | None = None,
    environment: str | None = None,
) -> TickerConfig:
    """Load settings and apply command-line overrides.

    Args:
        config_dir: Alternative directory holding ``settings.yaml``.
        interval: Override for ``ticker.interval_seconds``.
        duration: Override for ``ticker.run_seconds``.
        environment: Override for ``environment``.

    Returns:
        Validated ticker configuration.

    Raises:
        ConfigError: If the settings or overrides are invalid.

    """
    loader = ConfigLoader(config_dir=config_dir) if config_dir is not None else get_config()
    config = TickerConfig.from_loader(loader)

    overrides: dict[str, object] = {}
    if interval is not None:
        overrides["interval_seconds"] = interval
    if duration is not None:
        overrides["run_seconds"] = duration
    if environment:
        overrides["environment"] = environment
    if overrides:
        config = replace(config, **overrides)  # pyright: ignore[reportArgumentType]
    return config
