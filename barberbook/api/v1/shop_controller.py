"""
Shop Controller
===============

FastAPI controller for the /barbershop endpoints.
"""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Response, status

from barberbook.api.v1.dependencies import get_shop_service
from barberbook.application.dto.shop_dto import (
    ShopCreatedResponse,
    ShopLookupResponse,
    ShopResponse,
)
from barberbook.application.services.shop_service import ShopService

router = APIRouter(tags=["barbershop"])


@router.get(
    "/barbershop",
    response_model=ShopLookupResponse,
    response_model_exclude_none=True,
    summary="Look up an owner's shop",
)
async def get_barbershop(
    uid: Optional[str] = None,
    service: ShopService = Depends(get_shop_service),
) -> ShopLookupResponse:
    """Return whether the owner has a shop and, if so, its data."""
    shop = await service.get_shop_by_owner(uid)
    if shop is None:
        return ShopLookupResponse(exists=False)
    return ShopLookupResponse(exists=True, shopId=shop.id, data=ShopResponse.from_entity(shop))


@router.post(
    "/barbershop",
    response_model=ShopCreatedResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create an owner's shop",
    description="""
    Create the shop of an owner.

    If the owner already has a shop, nothing is created and the existing
    shop id is returned with 200 and ``alreadyExists: true``.
    """,
)
async def create_barbershop(
    response: Response,
    payload: Dict[str, Any] = Body(...),
    service: ShopService = Depends(get_shop_service),
) -> ShopCreatedResponse:
    registration = await service.register_shop(uid=payload.get("uid"), name=payload.get("name"))
    if registration.already_exists:
        response.status_code = status.HTTP_200_OK
        return ShopCreatedResponse(shopId=registration.shop_id, alreadyExists=True)
    return ShopCreatedResponse(shopId=registration.shop_id)
