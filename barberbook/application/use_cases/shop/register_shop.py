"""
Register Shop Use Case
======================

Creates the shop of an owner, or reports the one that already exists.
"""
import logging
from dataclasses import dataclass
from typing import Any

from barberbook.application.validation import require_string
from barberbook.domain.models.shop import Shop
from barberbook.domain.repositories.shop_repository import ShopRepository

logger = logging.getLogger(__name__)


@dataclass
class ShopRegistration:
    shop_id: str
    already_exists: bool


class RegisterShopUseCase:
    """
    Use case for registering an owner's shop.

    The owner lookup and the insert are two separate store calls with no
    lock or transaction between them: two concurrent requests for the same
    owner can both end up inserting a shop.
    """

    def __init__(self, shop_repository: ShopRepository):
        """
        Initialize use case with repository.

        Args:
            shop_repository: Repository for shop persistence
        """
        self._repository = shop_repository

    async def execute(self, uid: Any, name: Any) -> ShopRegistration:
        """
        Execute the register shop use case.

        Args:
            uid: Raw owner user id from the request
            name: Raw shop name from the request

        Returns:
            ShopRegistration with the new or existing shop id

        Raises:
            ValidationFailure: If uid or name is missing or empty
        """
        owner_user_id = require_string(uid, "uid")
        shop_name = require_string(name, "name")

        existing = await self._repository.find_by_owner(owner_user_id)
        if existing is not None:
            return ShopRegistration(shop_id=existing.id, already_exists=True)

        shop_id = await self._repository.create(Shop(owner_user_id=owner_user_id, name=shop_name))
        logger.info(f"Shop {shop_id} created for owner {owner_user_id}")
        return ShopRegistration(shop_id=shop_id, already_exists=False)
