"""
Service Model
=============

Domain model representing a bookable service (haircut, beard trim, ...).
"""
import math
from typing import Any, Optional
from dataclasses import dataclass


@dataclass
class Service:
    """
    Service domain model.

    ``duration_minutes`` is kept exactly as stored: documents written by
    other tools may carry a missing or malformed duration, and the booking
    pipeline has to be able to tell.
    """
    shop_id: str
    name: str
    duration_minutes: Any
    price: Any
    id: Optional[str] = None

    def has_valid_duration(self) -> bool:
        """Check that the duration is a finite number strictly above zero."""
        value = self.duration_minutes
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return False
        try:
            return math.isfinite(value) and value > 0
        except OverflowError:
            return False
