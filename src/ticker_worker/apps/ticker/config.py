"""Configuration dataclass for the ticker worker.

Hold the tuneable parameters of a ticker session: the wait between ticks,
the hosting environment name, and an optional run duration. Immutable
after construction so a running host cannot be reconfigured underneath
the loop.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ticker_worker.apps.ticker.ticker import DEFAULT_INTERVAL_SECONDS
from ticker_worker.core.config import ConfigError

if TYPE_CHECKING:
    from ticker_worker.core.config import ConfigLoader

_DEFAULT_ENVIRONMENT = "Production"


def _parse_seconds(name: str, value: Any) -> float | None:
    """Convert a config value to seconds, treating blanks as unset.

    Args:
        name: Setting name used in error messages.
        value: Raw value from YAML or the environment.

    Returns:
        Seconds as a float, or None when the value is empty.

    Raises:
        ConfigError: If the value is not numeric.

    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        msg = f"{name} must be a number, got {value!r}"
        raise ConfigError(msg) from exc


@dataclass(frozen=True)
class TickerConfig:
    """Immutable configuration for a ticker session.

    Attributes:
        interval_seconds: Time to wait on the cancellation signal after
            each tick. Zero yields to the event loop without waiting.
        environment: Hosting environment name reported at startup.
        run_seconds: Stop automatically after this many seconds. None
            runs until SIGINT/SIGTERM.

    """

    interval_seconds: float = DEFAULT_INTERVAL_SECONDS
    environment: str = _DEFAULT_ENVIRONMENT
    run_seconds: float | None = None

    def __post_init__(self) -> None:
        """Validate the interval and run duration."""
        if self.interval_seconds < 0:
            msg = f"ticker.interval_seconds must be non-negative, got {self.interval_seconds}"
            raise ConfigError(msg)
        if self.run_seconds is not None and self.run_seconds <= 0:
            msg = f"ticker.run_seconds must be positive, got {self.run_seconds}"
            raise ConfigError(msg)

    @classmethod
    def from_loader(cls, loader: ConfigLoader) -> TickerConfig:
        """Build a config from the ``ticker`` section of a loader.

        Missing or blank values fall back to the dataclass defaults.

        Args:
            loader: Loaded YAML configuration.

        Returns:
            Validated ticker configuration.

        Raises:
            ConfigError: If a value is non-numeric or out of range.

        """
        section = loader.get_ticker_config()
        interval = _parse_seconds("ticker.interval_seconds", section.get("interval_seconds"))
        run_seconds = _parse_seconds("ticker.run_seconds", section.get("run_seconds"))
        environment = str(loader.get("environment", "") or _DEFAULT_ENVIRONMENT)
        return cls(
            interval_seconds=DEFAULT_INTERVAL_SECONDS if interval is None else interval,
            environment=environment,
            run_seconds=run_seconds,
        )
