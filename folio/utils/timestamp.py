"""Timestamp parsing and formatting utilities."""

from datetime import datetime, timezone
from typing import Optional


def parse_timestamp(value: str) -> Optional[datetime]:
    """
    Parse an ISO 8601 date or datetime string into an aware UTC datetime.

    Naive values are taken to be UTC. A trailing "Z" and explicit offsets are
    honored and normalized to UTC.

    Args:
        value: ISO 8601 string (e.g., "2024-05-25", "2024-05-25T10:30:00+02:00")

    Returns:
        Aware datetime in UTC, or None if the string is not a valid timestamp

    Examples:
        parse_timestamp("2024-05-25")
        # datetime(2024, 5, 25, 0, 0, tzinfo=timezone.utc)

        parse_timestamp("May 25th")
        # None
    """
    text = value.strip()
    if not text:
        return None

    # fromisoformat() only accepts "Z" from Python 3.11 on
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def format_date(dt: datetime) -> str:
    """
    Format a timestamp the way post metadata blocks write it.

    Midnight UTC values are written as a bare date ("2024-05-25"), everything
    else as a full ISO 8601 datetime with a "Z" suffix.
    """
    dt = dt.astimezone(timezone.utc)
    if (dt.hour, dt.minute, dt.second, dt.microsecond) == (0, 0, 0, 0):
        return dt.strftime("%Y-%m-%d")
    return dt.replace(tzinfo=None).isoformat() + "Z"
