"""
Placeholder Slot Provider
=========================

Stand-in SlotProvider. It ignores the catalog and existing bookings and
always offers the same two half-hour slots starting at 09:00 UTC of the
requested day. Replace with a real availability source before relying on
the /slots endpoint.
"""
import logging
from datetime import datetime, timedelta
from typing import List, Optional

from barberbook.domain.repositories.slot_provider import Slot, SlotProvider

logger = logging.getLogger(__name__)

FIRST_SLOT_OFFSET = timedelta(hours=9)
SLOT_LENGTH = timedelta(minutes=30)
SLOT_COUNT = 2


class PlaceholderSlotProvider(SlotProvider):
    async def list_slots(
        self,
        day_start: datetime,
        service_ids: List[str],
        operator_id: Optional[str] = None,
    ) -> List[Slot]:
        logger.info(
            f"Placeholder slots requested for {day_start.date().isoformat()} "
            f"(services={service_ids}, operator={operator_id})"
        )
        first = day_start + FIRST_SLOT_OFFSET
        return [
            Slot(start=first + SLOT_LENGTH * index, end=first + SLOT_LENGTH * (index + 1), available=True)
            for index in range(SLOT_COUNT)
        ]
