"""
Operator Controller
===================

FastAPI controller for the /operators endpoints.
"""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, status

from barberbook.api.v1.dependencies import get_operator_service
from barberbook.application.dto.operator_dto import (
    OperatorCreatedResponse,
    OperatorListResponse,
    OperatorResponse,
)
from barberbook.application.services.operator_service import OperatorService

router = APIRouter(tags=["operators"])


@router.get("/operators", response_model=OperatorListResponse, summary="List a shop's operators")
async def list_operators(
    shopId: Optional[str] = None,
    service: OperatorService = Depends(get_operator_service),
) -> OperatorListResponse:
    operators = await service.list_operators(shopId)
    return OperatorListResponse(operators=[OperatorResponse.from_entity(op) for op in operators])


@router.post(
    "/operators",
    response_model=OperatorCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an operator",
)
async def create_operator(
    payload: Dict[str, Any] = Body(...),
    service: OperatorService = Depends(get_operator_service),
) -> OperatorCreatedResponse:
    operator_id = await service.create_operator(
        shop_id=payload.get("shopId"),
        name=payload.get("name"),
        service_ids=payload.get("servicesIds"),
        working_hours=payload.get("workingHours"),
    )
    return OperatorCreatedResponse(operatorId=operator_id)
