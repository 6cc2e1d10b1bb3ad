"""Utility functions for time handling."""

from .timestamps import (
    ensure_utc,
    format_timestamp,
    month_key,
    parse_iso_datetime,
    thread_month_key,
    unix_to_timestamp,
)

__all__ = [
    "ensure_utc",
    "parse_iso_datetime",
    "unix_to_timestamp",
    "format_timestamp",
    "month_key",
    "thread_month_key",
]
