"""CLI command for running the ticker worker.

Resolve configuration from settings, environment and flags, then run the
ticker under a ``WorkerHost`` until SIGINT/SIGTERM or the configured
duration elapses.
"""

import asyncio
import logging
from pathlib import Path
from typing import Annotated

import typer

from ticker_worker.apps.ticker.cli._helpers import configure_logging, resolve_config
from ticker_worker.apps.ticker.host import WorkerHost
from ticker_worker.core.config import ConfigError

logger = logging.getLogger(__name__)


def run(
    interval: Annotated[
        float | None, typer.Option(help="Seconds to wait between ticks (default 0.001)")
    ] = None,
    duration: Annotated[
        float | None, typer.Option(help="Stop after this many seconds (default: run until signalled)")
    ] = None,
    environment: Annotated[
        str | None, typer.Option(help="Hosting environment name reported at startup")
    ] = None,
    config_dir: Annotated[
        Path | None, typer.Option(help="Directory containing settings.yaml")
    ] = None,
    verbose: Annotated[  # noqa: FBT002
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """Run the ticker until interrupted.

    Each tick logs ``Worker running request number N at: <timestamp>``.
    Press Ctrl+C (or send SIGTERM) to stop, or pass ``--duration``.
    """
    configure_logging(verbose=verbose)

    try:
        config = resolve_config(
            config_dir=config_dir,
            interval=interval,
            duration=duration,
            environment=environment,
        )
    except ConfigError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    logger.debug("Resolved configuration: %s", config)
    typer.echo(f"Starting ticker (interval: {config.interval_seconds}s)")

    host = WorkerHost(config)
    count = asyncio.run(host.run())

    typer.echo(f"Stopped after {count} ticks")
