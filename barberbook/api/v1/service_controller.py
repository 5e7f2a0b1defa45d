"""
Service Controller
==================

FastAPI controller for the /services (catalog) endpoints.
"""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, status

from barberbook.api.v1.dependencies import get_catalog_service
from barberbook.application.dto.service_dto import (
    ServiceCreatedResponse,
    ServiceListResponse,
    ServiceResponse,
)
from barberbook.application.services.catalog_service import CatalogService

router = APIRouter(tags=["services"])


@router.get("/services", response_model=ServiceListResponse, summary="List a shop's services")
async def list_services(
    shopId: Optional[str] = None,
    catalog: CatalogService = Depends(get_catalog_service),
) -> ServiceListResponse:
    services = await catalog.list_services(shopId)
    return ServiceListResponse(services=[ServiceResponse.from_entity(item) for item in services])


@router.post(
    "/services",
    response_model=ServiceCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a service to a shop's catalog",
    description="durationMinutes must be greater than 0 and price at least 0.",
)
async def create_service(
    payload: Dict[str, Any] = Body(...),
    catalog: CatalogService = Depends(get_catalog_service),
) -> ServiceCreatedResponse:
    service_id = await catalog.create_service(
        shop_id=payload.get("shopId"),
        name=payload.get("name"),
        duration_minutes=payload.get("durationMinutes"),
        price=payload.get("price"),
    )
    return ServiceCreatedResponse(serviceId=service_id)
