"""Timestamp utilities for UTC handling and datetime parsing.

This module provides utilities for working with comment timestamps:
- Parsing ISO 8601 datetime strings and unix seconds
- Converting timezone-naive to timezone-aware UTC
- Deriving the YYYY-MM month key of a hiring thread (from its title or a timestamp)
"""

import re
from datetime import datetime, timezone
from typing import Optional, Union

_MONTH_NAMES = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)
_MONTH_NUMBERS = {name: number for number, name in enumerate(_MONTH_NAMES, start=1)}
_THREAD_MONTH = re.compile(
    r"\b(" + "|".join(_MONTH_NAMES) + r")\s+(\d{4})\b", re.IGNORECASE
)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """Ensure a datetime is timezone-aware and in UTC.

    If the datetime is timezone-naive, it's treated as UTC.
    If the datetime has a different timezone, it's converted to UTC.

    Args:
        dt: Datetime to convert (can be None)

    Returns:
        Timezone-aware datetime in UTC, or None if input is None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)

    return dt.astimezone(timezone.utc)


def parse_iso_datetime(iso_string: Optional[str]) -> Optional[datetime]:
    """Parse an ISO 8601 datetime string to UTC datetime.

    Supports the forms the search API emits and a few looser ones:
    - 2025-11-04T12:00:00.000Z
    - 2025-11-04T12:00:00+00:00
    - 2025-11-04T12:00:00
    - 2025-11-04

    Args:
        iso_string: ISO 8601 formatted datetime string

    Returns:
        Timezone-aware datetime in UTC, or None if parsing fails

    Example:
        >>> dt = parse_iso_datetime("2025-11-04T12:00:00Z")
        >>> dt.year == 2025 and dt.month == 11 and dt.day == 4
        True
    """
    if not iso_string or not iso_string.strip():
        return None

    cleaned = iso_string.strip()
    # fromisoformat on older interpreters rejects the Z suffix
    if cleaned.endswith(("Z", "z")):
        cleaned = cleaned[:-1] + "+00:00"

    try:
        return ensure_utc(datetime.fromisoformat(cleaned))
    except ValueError:
        pass

    for fmt in ("%Y-%m-%dT%H:%M:%S.%f%z", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d"):
        try:
            return ensure_utc(datetime.strptime(cleaned, fmt))
        except ValueError:
            continue

    return None


def unix_to_timestamp(unix_seconds: int) -> datetime:
    """Convert Unix timestamp to datetime in UTC."""
    return datetime.fromtimestamp(unix_seconds, tz=timezone.utc)


def format_timestamp(dt: datetime) -> str:
    """Format a datetime as ISO 8601 string in UTC with a 'Z' suffix.

    Example:
        >>> format_timestamp(datetime(2025, 11, 4, 12, 0, 0, tzinfo=timezone.utc))
        '2025-11-04T12:00:00Z'
    """
    dt_utc = ensure_utc(dt)
    if dt_utc is None:
        return ""
    return dt_utc.strftime("%Y-%m-%dT%H:%M:%SZ")


def month_key(value: Union[str, datetime, None]) -> Optional[str]:
    """Return the ``YYYY-MM`` key of the UTC month a timestamp falls in.

    Hiring threads are posted monthly; postings are grouped by this key.

    Args:
        value: ISO 8601 string or datetime

    Returns:
        Month key, or None when the value cannot be parsed

    Example:
        >>> month_key("2025-03-01T16:00:12.000Z")
        '2025-03'
    """
    if isinstance(value, datetime):
        dt = ensure_utc(value)
    else:
        dt = parse_iso_datetime(value)

    if dt is None:
        return None
    return dt.strftime("%Y-%m")


def thread_month_key(
    story_title: Optional[str], created_at: Union[str, datetime, None] = None
) -> Optional[str]:
    """Return the ``YYYY-MM`` key of the hiring thread a comment belongs to.

    Thread titles carry their month ("Ask HN: Who is hiring? (March 2025)"),
    so comments posted after the month ends still key to their thread. When
    the title names no month, the comment's own timestamp is used.

    Args:
        story_title: Title of the thread the comment was posted in
        created_at: Comment timestamp, used as the fallback

    Returns:
        Month key, or None when neither value yields one

    Example:
        >>> thread_month_key("Ask HN: Who is hiring? (March 2025)", "2025-04-02T08:00:00Z")
        '2025-03'
    """
    match = _THREAD_MONTH.search(story_title or "")
    if match:
        return f"{match.group(2)}-{_MONTH_NUMBERS[match.group(1).lower()]:02d}"
    return month_key(created_at)
