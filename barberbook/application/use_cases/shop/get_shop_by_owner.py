"""
Get Shop By Owner Use Case
==========================
"""
from typing import Any, Optional

from barberbook.application.validation import require_string
from barberbook.domain.models.shop import Shop
from barberbook.domain.repositories.shop_repository import ShopRepository


class GetShopByOwnerUseCase:
    """Use case for looking up the shop that belongs to an owner."""

    def __init__(self, shop_repository: ShopRepository):
        self._repository = shop_repository

    async def execute(self, uid: Any) -> Optional[Shop]:
        owner_user_id = require_string(uid, "uid")
        return await self._repository.find_by_owner(owner_user_id)
