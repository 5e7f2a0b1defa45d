"""
Field Validation
================

Synchronous, side-effect-free checks for raw request values.

Each validator takes the raw value and the wire name of the field, and
either returns the typed value or raises ValidationFailure naming the
field. Use cases call them one field at a time, so the first failure
stops the request before any repository is touched.
"""
import math
import re
from datetime import datetime
from typing import Any, Dict, List, Optional

from barberbook.domain.exceptions import ValidationFailure
from barberbook.utils.datetime_utils import parse_iso, utc_midnight

DAY_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


def require_string(value: Any, field: str) -> str:
    """Non-empty (after trimming) string; returns the trimmed value."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationFailure(field, f"{field} is required and must be a non-empty string")
    return value.strip()


def require_string_array(value: Any, field: str) -> List[str]:
    """List of strings, possibly empty; returned unchanged."""
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValidationFailure(field, f"{field} must be an array of strings")
    return value


def require_object(value: Any, field: str) -> Dict[str, Any]:
    """JSON object (not an array); its contents are not inspected."""
    if not isinstance(value, dict):
        raise ValidationFailure(field, f"{field} must be an object")
    return value


def require_number(
    value: Any,
    field: str,
    minimum: float = 0,
    exclusive: bool = False,
) -> float:
    """
    Finite number bounded below by ``minimum``.

    Args:
        value: Raw value
        field: Wire name of the field
        minimum: Lower bound
        exclusive: True for ``value > minimum``, False for ``value >= minimum``

    Returns:
        The number as received (int or float)

    Raises:
        ValidationFailure: If the value is not a number (booleans included)
            or violates the bound
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationFailure(field, f"{field} must be a number")
    try:
        finite = math.isfinite(value)
    except OverflowError:
        finite = False
    if not finite:
        raise ValidationFailure(field, f"{field} must be a number")
    if exclusive and value <= minimum:
        raise ValidationFailure(field, f"{field} must be greater than {minimum:g}")
    if not exclusive and value < minimum:
        raise ValidationFailure(field, f"{field} must be greater than or equal to {minimum:g}")
    return value


def require_datetime(value: Any, field: str) -> datetime:
    """ISO-8601 date-time text parsed into an aware datetime."""
    text = require_string(value, field)
    parsed = parse_iso(text)
    if parsed is None:
        raise ValidationFailure(field, f"{field} must be a valid ISO-8601 date-time")
    return parsed


def require_day(value: Any, field: str) -> datetime:
    """
    ``YYYY-MM-DD`` text; returns midnight UTC of that day.

    Only the pattern is checked: a day past the end of its month rolls
    forward (2024-02-30 is 2024-03-01). Month 00/13+ and day 00/32+
    cannot form a date and are rejected.
    """
    match = DAY_PATTERN.fullmatch(value) if isinstance(value, str) else None
    if match is None:
        raise ValidationFailure(field, f"{field} must be in YYYY-MM-DD format")
    year, month, day = (int(part) for part in match.groups())
    try:
        return utc_midnight(year, month, day)
    except ValueError:
        raise ValidationFailure(field, f"{field} is not a valid calendar date")


def optional_string(value: Any, default: str = "") -> str:
    """Return ``value`` if it is a string, otherwise ``default``."""
    return value if isinstance(value, str) else default


def optional_object(value: Any, field: str, default: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Like require_object, but an absent (None) value yields ``default`` or {}."""
    if value is None:
        return dict(default or {})
    return require_object(value, field)
