"""Pretty formatting utilities for CLI output."""

import datetime

ELLIPSIS = "…"


def truncate(text: str, length: int) -> str:
    """Shorten text to at most length characters, ending with an ellipsis."""
    if len(text) > length:
        return text[:length - 1].strip() + ELLIPSIS
    return text


def local_date(timestamp_ms: int) -> datetime.date:
    """Calendar date of a millisecond timestamp in the local timezone."""
    return datetime.datetime.fromtimestamp(timestamp_ms / 1000).date()


def format_date(date: datetime.date) -> str:
    """Format a date like 'Mon Jan 01 2024'."""
    return date.strftime("%a %b %d %Y")
