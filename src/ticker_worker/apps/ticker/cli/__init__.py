"""CLI subpackage for the ticker worker.

Create the Typer application and register the command modules.
"""

import typer

from ticker_worker.apps.ticker.cli.run_cmd import run

app = typer.Typer(help="Cancellable background ticker service")

app.command()(run)


@app.callback()
def _main() -> None:  # pyright: ignore[reportUnusedFunction]
    """Cancellable background ticker service."""


__all__ = ["app"]
