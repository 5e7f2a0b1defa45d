"""
Operator DTO
============

Pydantic models for operator API responses.
"""
from typing import Any, Dict, List
from pydantic import BaseModel

from barberbook.domain.models.operator import Operator


class OperatorResponse(BaseModel):
    id: str
    shopId: str
    name: str
    servicesIds: List[str]
    workingHours: Dict[str, Any]

    @classmethod
    def from_entity(cls, operator: Operator) -> "OperatorResponse":
        return cls(
            id=operator.id,
            shopId=operator.shop_id,
            name=operator.name,
            servicesIds=operator.service_ids,
            workingHours=operator.working_hours,
        )

    class Config:
        json_schema_extra = {
            "example": {
                "id": "65f1c0a2e4b0a1b2c3d4e5f7",
                "shopId": "65f1c0a2e4b0a1b2c3d4e5f6",
                "name": "Marco",
                "servicesIds": ["65f1c0a2e4b0a1b2c3d4e5f8"],
                "workingHours": {"mon": ["09:00", "18:00"]},
            }
        }


class OperatorListResponse(BaseModel):
    operators: List[OperatorResponse]


class OperatorCreatedResponse(BaseModel):
    operatorId: str
