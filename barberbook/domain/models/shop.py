"""
Shop Model
==========

Domain model representing a barbershop (the root of all other entities).
This is a pure domain object with no infrastructure dependencies.
"""
from datetime import datetime
from typing import Optional
from dataclasses import dataclass, field

from barberbook.utils.datetime_utils import now


@dataclass
class Shop:
    """
    Shop domain model.

    One shop per owner. The owner check happens before creation and is not
    enforced by the store.
    """
    owner_user_id: str
    name: str
    id: Optional[str] = None  # Assigned by the store on creation
    created_at: datetime = field(default_factory=lambda: now())
