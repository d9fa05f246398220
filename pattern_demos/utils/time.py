"""Wall-clock time helpers for log entry timestamps."""

from datetime import datetime

DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def now_local() -> datetime:
    """Return the current local time, timezone-aware."""
    return datetime.now().astimezone()


def format_timestamp(dt: datetime, fmt: str = DEFAULT_TIMESTAMP_FORMAT) -> str:
    """
    Render a timestamp for display in a log entry.

    Args:
        dt: Timestamp to render
        fmt: strftime format, second resolution by default

    Returns:
        Formatted timestamp string
    """
    return dt.strftime(fmt)
