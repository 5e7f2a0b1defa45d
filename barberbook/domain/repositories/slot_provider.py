"""
Slot Provider Interface
=======================

Contract for listing bookable time slots. The only implementation is a
placeholder that returns fixed intervals; no availability is computed.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional


@dataclass
class Slot:
    start: datetime
    end: datetime
    available: bool = True


class SlotProvider(ABC):
    """Abstract source of candidate slots for a day."""

    @abstractmethod
    async def list_slots(
        self,
        day_start: datetime,
        service_ids: List[str],
        operator_id: Optional[str] = None,
    ) -> List[Slot]:
        pass
