"""
List Available Slots Use Case
=============================

Validates a slot request and delegates to the configured SlotProvider.
"""
from typing import Any, List

from barberbook.application.validation import require_day, require_string_array
from barberbook.domain.repositories.slot_provider import Slot, SlotProvider


class ListAvailableSlotsUseCase:
    def __init__(self, slot_provider: SlotProvider):
        self._provider = slot_provider

    async def execute(self, date: Any, service_ids: Any, operator_id: Any = None) -> List[Slot]:
        day_start = require_day(date, "date")
        services = require_string_array(service_ids, "serviceIds")
        operator = operator_id if isinstance(operator_id, str) and operator_id else None
        return await self._provider.list_slots(day_start, services, operator)
