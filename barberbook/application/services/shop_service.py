"""
Shop Service
============

Application service that coordinates shop-related operations.
"""
from typing import Any, Optional

from barberbook.application.use_cases.shop.get_shop_by_owner import GetShopByOwnerUseCase
from barberbook.application.use_cases.shop.register_shop import (
    RegisterShopUseCase,
    ShopRegistration,
)
from barberbook.domain.models.shop import Shop
from barberbook.domain.repositories.shop_repository import ShopRepository


class ShopService:
    """
    Application service for shop operations.

    This service coordinates the shop use cases and provides
    a high-level interface for the shop endpoints.
    """

    def __init__(self, shop_repository: ShopRepository):
        """
        Initialize service with repository.

        Args:
            shop_repository: Repository for shop persistence
        """
        self._repository = shop_repository
        self._register_use_case = RegisterShopUseCase(shop_repository)
        self._get_by_owner_use_case = GetShopByOwnerUseCase(shop_repository)

    async def register_shop(self, uid: Any, name: Any) -> ShopRegistration:
        """
        Register the shop of an owner (idempotent for sequential calls).

        Args:
            uid: Owner user id
            name: Shop name

        Returns:
            ShopRegistration with shop id and whether it already existed
        """
        return await self._register_use_case.execute(uid=uid, name=name)

    async def get_shop_by_owner(self, uid: Any) -> Optional[Shop]:
        """
        Get the shop of an owner.

        Args:
            uid: Owner user id

        Returns:
            Shop entity if the owner has one, None otherwise
        """
        return await self._get_by_owner_use_case.execute(uid)
