"""CLI entry point for the ticker worker.

Provide the console-script ``main`` function. All command logic lives in
the cli subpackage.
"""

from ticker_worker.apps.ticker.cli import app

__all__ = ["app", "main"]


def main() -> None:
    """Run the ticker worker CLI application."""
    app()


if __name__ == "__main__":
    main()
