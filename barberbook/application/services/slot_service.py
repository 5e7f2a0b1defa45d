"""
Slot Service
============

Thin application service over the slot listing use case.
"""
from typing import Any, List

from barberbook.application.use_cases.slots.list_available_slots import ListAvailableSlotsUseCase
from barberbook.domain.repositories.slot_provider import Slot, SlotProvider


class SlotService:
    def __init__(self, slot_provider: SlotProvider):
        self._list_use_case = ListAvailableSlotsUseCase(slot_provider)

    async def list_available_slots(self, date: Any, service_ids: Any, operator_id: Any = None) -> List[Slot]:
        return await self._list_use_case.execute(date=date, service_ids=service_ids, operator_id=operator_id)
