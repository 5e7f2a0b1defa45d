"""
Shop DTO
========

Pydantic models for shop API responses.
"""
from typing import Optional
from pydantic import BaseModel, Field

from barberbook.domain.models.shop import Shop
from barberbook.utils.datetime_utils import to_iso


class ShopResponse(BaseModel):
    """DTO for shop data. Field names match the stored document."""
    id: str
    ownerUserId: Optional[str]
    name: Optional[str]
    createdAt: Optional[str] = Field(None, description="ISO-8601 instant assigned by the server")

    @classmethod
    def from_entity(cls, shop: Shop) -> "ShopResponse":
        return cls(
            id=shop.id,
            ownerUserId=shop.owner_user_id,
            name=shop.name,
            createdAt=to_iso(shop.created_at),
        )

    class Config:
        json_schema_extra = {
            "example": {
                "id": "65f1c0a2e4b0a1b2c3d4e5f6",
                "ownerUserId": "owner-123",
                "name": "Fade Factory",
                "createdAt": "2024-03-01T08:00:00.000Z",
            }
        }


class ShopLookupResponse(BaseModel):
    """DTO for GET /barbershop. shopId and data are omitted when exists is false."""
    exists: bool
    shopId: Optional[str] = None
    data: Optional[ShopResponse] = None


class ShopCreatedResponse(BaseModel):
    """DTO for POST /barbershop."""
    shopId: str
    alreadyExists: Optional[bool] = Field(None, description="Only present when the owner already had a shop")
