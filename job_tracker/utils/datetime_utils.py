"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling across the entire application.
All datetime operations use the timezone configured in job_tracker.core.config.

Functions:
- now(): Returns timezone-aware datetime object
- to_iso(): Convert datetime object to ISO 8601 string
"""
import logging
import zoneinfo
from datetime import datetime, timezone as dt_timezone, tzinfo
from typing import Optional

from job_tracker.core.config import get_settings

logger = logging.getLogger(__name__)


def _get_app_timezone() -> tzinfo:
    """
    Get the application timezone from config.
    Returns timezone object (defaults to UTC if invalid).
    """
    tz_str = get_settings().timezone

    # Handle UTC explicitly
    if tz_str.upper() == "UTC":
        return dt_timezone.utc

    try:
        return zoneinfo.ZoneInfo(tz_str)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError):
        logger.warning("Invalid timezone '%s', falling back to UTC", tz_str)
        return dt_timezone.utc


def now() -> datetime:
    """
    Get current datetime with application-configured timezone.

    Returns:
        timezone-aware datetime object
    """
    return datetime.now(_get_app_timezone())


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Convert datetime object to ISO 8601 string with millisecond precision.

    Naive datetimes are treated as UTC (MongoDB stores UTC). The result is
    rendered in the application timezone, with 'Z' as the suffix for UTC.

    Args:
        dt: datetime object (timezone-aware or naive)

    Returns:
        ISO 8601 formatted string (e.g., "2025-12-24T10:30:00.123Z"), or None if dt is None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=dt_timezone.utc)

    dt = dt.astimezone(_get_app_timezone())

    # Format with timezone offset, or 'Z' if UTC
    text = dt.isoformat(timespec="milliseconds")
    if dt.utcoffset() == dt_timezone.utc.utcoffset(None):
        return text.replace("+00:00", "Z")
    return text
