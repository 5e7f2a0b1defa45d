"""
Slot Controller
===============

FastAPI controller for the placeholder /slots endpoint.
"""
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from barberbook.api.v1.dependencies import get_slot_service
from barberbook.application.dto.slot_dto import SlotListResponse, SlotResponse
from barberbook.application.services.slot_service import SlotService

router = APIRouter(tags=["slots"])


@router.post(
    "/slots",
    response_model=SlotListResponse,
    summary="List available slots (placeholder)",
    description="""
    Returns two fixed half-hour slots (09:00 and 09:30 UTC) on the requested
    day. Availability is not computed yet.
    """,
)
async def list_slots(
    payload: Dict[str, Any] = Body(...),
    service: SlotService = Depends(get_slot_service),
) -> SlotListResponse:
    slots = await service.list_available_slots(
        date=payload.get("date"),
        service_ids=payload.get("serviceIds"),
        operator_id=payload.get("operatorId"),
    )
    return SlotListResponse(slots=[SlotResponse.from_slot(slot) for slot in slots])
