"""
Booking Controller
==================

FastAPI controller for the /bookings endpoints.
"""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, status

from barberbook.api.v1.dependencies import get_booking_service
from barberbook.application.dto.booking_dto import (
    BookingCreatedResponse,
    BookingListResponse,
    BookingResponse,
)
from barberbook.application.services.booking_service import BookingService
from barberbook.utils.datetime_utils import to_iso

router = APIRouter(tags=["bookings"])


@router.get(
    "/bookings",
    response_model=BookingListResponse,
    summary="List a shop's bookings for a day",
    description="""
    Return every booking of the shop whose startTime falls on the given
    UTC day (``date`` as YYYY-MM-DD), bounds inclusive. Order is not
    guaranteed.
    """,
)
async def list_bookings(
    shopId: Optional[str] = None,
    date: Optional[str] = None,
    service: BookingService = Depends(get_booking_service),
) -> BookingListResponse:
    bookings = await service.list_bookings_for_day(shop_id=shopId, date=date)
    return BookingListResponse(bookings=[BookingResponse.from_entity(b) for b in bookings])


@router.post(
    "/bookings",
    response_model=BookingCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a booking",
    description="""
    Create a booking. The end time is computed from the referenced
    service's durationMinutes.

    - 400 when a field is missing/invalid or the service does not exist in the shop
    - 500 when the stored service has no usable duration
    """,
)
async def create_booking(
    payload: Dict[str, Any] = Body(...),
    service: BookingService = Depends(get_booking_service),
) -> BookingCreatedResponse:
    confirmation = await service.create_booking(
        shop_id=payload.get("shopId"),
        customer_name=payload.get("customerName"),
        customer_phone=payload.get("customerPhone"),
        service_id=payload.get("serviceId"),
        operator_id=payload.get("operatorId"),
        start_time=payload.get("startTime"),
        notes=payload.get("notes"),
    )
    return BookingCreatedResponse(
        bookingId=confirmation.booking_id,
        endTime=to_iso(confirmation.end_time),
    )
