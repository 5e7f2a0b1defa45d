"""
Booking DTO
===========

Pydantic models for booking API responses.
"""
from typing import List, Optional
from pydantic import BaseModel, Field

from barberbook.domain.models.booking import Booking
from barberbook.utils.datetime_utils import to_iso


class BookingResponse(BaseModel):
    """
    DTO for booking data. Times are ISO-8601 UTC instants.

    Only the id fields are guaranteed; other fields missing from the stored
    document are returned as null.
    """
    id: str
    shopId: str
    customerName: Optional[str]
    customerPhone: Optional[str]
    serviceId: Optional[str]
    operatorId: Optional[str]
    startTime: Optional[str]
    endTime: Optional[str]
    notes: Optional[str]

    @classmethod
    def from_entity(cls, booking: Booking) -> "BookingResponse":
        return cls(
            id=booking.id,
            shopId=booking.shop_id,
            customerName=booking.customer_name,
            customerPhone=booking.customer_phone,
            serviceId=booking.service_id,
            operatorId=booking.operator_id,
            startTime=to_iso(booking.start_time),
            endTime=to_iso(booking.end_time),
            notes=booking.notes,
        )

    class Config:
        json_schema_extra = {
            "example": {
                "id": "65f1c0a2e4b0a1b2c3d4e5f9",
                "shopId": "65f1c0a2e4b0a1b2c3d4e5f6",
                "customerName": "Luca Bianchi",
                "customerPhone": "+39 333 1234567",
                "serviceId": "65f1c0a2e4b0a1b2c3d4e5f8",
                "operatorId": "65f1c0a2e4b0a1b2c3d4e5f7",
                "startTime": "2024-03-15T10:00:00.000Z",
                "endTime": "2024-03-15T10:30:00.000Z",
                "notes": "",
            }
        }


class BookingListResponse(BaseModel):
    bookings: List[BookingResponse]


class BookingCreatedResponse(BaseModel):
    bookingId: str
    endTime: str = Field(..., description="Computed end time, ISO-8601 UTC instant")
