"""
Service DTO
===========

Pydantic models for service catalog API responses.
"""
from typing import Any, List
from pydantic import BaseModel

from barberbook.domain.models.service import Service


class ServiceResponse(BaseModel):
    id: str
    shopId: str
    name: str
    # Returned as stored, even when a foreign writer left something odd
    durationMinutes: Any
    price: Any

    @classmethod
    def from_entity(cls, service: Service) -> "ServiceResponse":
        return cls(
            id=service.id,
            shopId=service.shop_id,
            name=service.name,
            durationMinutes=service.duration_minutes,
            price=service.price,
        )

    class Config:
        json_schema_extra = {
            "example": {
                "id": "65f1c0a2e4b0a1b2c3d4e5f8",
                "shopId": "65f1c0a2e4b0a1b2c3d4e5f6",
                "name": "Haircut",
                "durationMinutes": 30,
                "price": 25,
            }
        }


class ServiceListResponse(BaseModel):
    services: List[ServiceResponse]


class ServiceCreatedResponse(BaseModel):
    serviceId: str
