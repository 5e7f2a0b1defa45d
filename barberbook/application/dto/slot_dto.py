"""
Slot DTO
========
"""
from typing import List
from pydantic import BaseModel

from barberbook.domain.repositories.slot_provider import Slot
from barberbook.utils.datetime_utils import to_iso


class SlotResponse(BaseModel):
    start: str
    end: str
    available: bool

    @classmethod
    def from_slot(cls, slot: Slot) -> "SlotResponse":
        return cls(start=to_iso(slot.start), end=to_iso(slot.end), available=slot.available)


class SlotListResponse(BaseModel):
    slots: List[SlotResponse]
