"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling across the entire application.
Naive datetimes are interpreted in the timezone configured in
barberbook.core.config; everything crossing the HTTP boundary is rendered
as a UTC instant with millisecond precision.

Functions:
- now(): Returns timezone-aware datetime object
- parse_iso(): Safely parse ISO 8601 string to datetime
- to_iso(): Convert datetime object to ISO 8601 instant string
- add_minutes(): Offset a datetime by a (possibly fractional) number of minutes
- utc_midnight(): Midnight UTC for a year/month/day, rolling day overflow forward
- utc_day_range(): Inclusive [00:00:00.000, 23:59:59.999] bounds of a UTC day
"""
import logging
import zoneinfo
from datetime import datetime, timedelta, timezone as dt_timezone, tzinfo
from typing import Optional, Tuple

from barberbook.core.config import get_settings

logger = logging.getLogger(__name__)

_LAST_MILLISECOND = timedelta(days=1) - timedelta(milliseconds=1)


def _get_app_timezone() -> tzinfo:
    """
    Get the application timezone from config.
    Returns timezone object (defaults to UTC if invalid).
    """
    tz_str = get_settings().timezone

    if tz_str.upper() == "UTC":
        return dt_timezone.utc

    try:
        return zoneinfo.ZoneInfo(tz_str)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError):
        logger.warning(f"Invalid timezone '{tz_str}', falling back to UTC")
        return dt_timezone.utc


def _truncate_to_millis(dt: datetime) -> datetime:
    return dt.replace(microsecond=(dt.microsecond // 1000) * 1000)


def now() -> datetime:
    """
    Get current datetime with application-configured timezone.

    Returns:
        timezone-aware datetime object
    """
    return _truncate_to_millis(datetime.now(_get_app_timezone()))


def parse_iso(dt_str: Optional[str]) -> Optional[datetime]:
    """
    Parse ISO 8601 string to datetime object.
    Handles both timezone-aware and naive strings.
    If string is naive, assumes application timezone.

    Args:
        dt_str: ISO 8601 string (e.g., "2025-12-24T10:30:00Z" or "2025-12-24T10:30:00+05:30")

    Returns:
        timezone-aware datetime truncated to milliseconds, or None if parsing fails
    """
    if not dt_str:
        return None

    try:
        normalized = dt_str.strip().replace("Z", "+00:00")
        dt = datetime.fromisoformat(normalized)
    except ValueError:
        return None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=_get_app_timezone())

    return _truncate_to_millis(dt)


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Convert datetime object to an ISO 8601 UTC instant.
    If datetime is naive, assumes application timezone.

    Args:
        dt: datetime object (timezone-aware or naive)

    Returns:
        String like "2024-03-15T10:30:00.000Z", or None if dt is None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=_get_app_timezone())

    utc = dt.astimezone(dt_timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def add_minutes(start: datetime, minutes: float) -> datetime:
    """
    Offset ``start`` by ``minutes``.

    Fractional minutes are honoured down to the millisecond; anything
    finer is truncated toward zero.
    """
    return start + timedelta(milliseconds=int(minutes * 60_000))


def utc_midnight(year: int, month: int, day: int) -> datetime:
    """
    Midnight UTC of the given calendar day.

    Days past the end of the month roll into the next month
    (2024-02-30 -> 2024-03-01). Raises ValueError when month is outside
    1..12 or day is outside 1..31.
    """
    if not 1 <= month <= 12 or not 1 <= day <= 31:
        raise ValueError(f"Invalid calendar day {year:04d}-{month:02d}-{day:02d}")
    first_of_month = datetime(year, month, 1, tzinfo=dt_timezone.utc)
    return first_of_month + timedelta(days=day - 1)


def utc_day_range(day_start: datetime) -> Tuple[datetime, datetime]:
    """Inclusive bounds covering the whole UTC day that begins at ``day_start``."""
    return day_start, day_start + _LAST_MILLISECOND
