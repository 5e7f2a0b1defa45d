"""
Booking Model
=============

Domain model representing a customer appointment.
"""
from datetime import datetime
from typing import Optional
from dataclasses import dataclass


@dataclass
class Booking:
    """
    Booking domain model.

    ``end_time`` is derived from the service duration when the booking is
    created and never recomputed afterwards.
    """
    shop_id: str
    customer_name: str
    customer_phone: str
    service_id: str
    operator_id: str
    start_time: datetime
    end_time: datetime
    notes: str = ""
    id: Optional[str] = None
