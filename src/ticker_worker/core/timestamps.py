"""Wall-clock helpers for log message timestamps."""

from datetime import datetime


def local_now() -> datetime:
    """Return the current local time with its UTC offset attached.

    Returns:
        Timezone-aware datetime in the host's local zone.

    """
    return datetime.now().astimezone()


def format_timestamp(value: datetime) -> str:
    """Format a datetime as ISO 8601 with millisecond precision.

    Naive values are assumed to be local time and get the local offset.

    Args:
        value: Datetime to format.

    Returns:
        String such as ``2024-01-01T12:00:00.000+00:00``.

    """
    if value.tzinfo is None:
        value = value.astimezone()
    return value.isoformat(timespec="milliseconds")
