"""
Shop Repository Interface
=========================

Abstract interface for shop data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Optional

from barberbook.domain.models.shop import Shop


class ShopRepository(ABC):
    """
    Abstract repository for shop persistence operations.

    This interface defines the contract for shop data access.
    Concrete implementations should be in the infrastructure layer.
    """

    @abstractmethod
    async def create(self, shop: Shop) -> str:
        """
        Create a new shop.

        Args:
            shop: Shop entity to create

        Returns:
            Identifier generated by the store
        """
        pass

    @abstractmethod
    async def find_by_id(self, shop_id: str) -> Optional[Shop]:
        """
        Find a shop by its ID.

        Args:
            shop_id: Shop identifier

        Returns:
            Shop entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_owner(self, owner_user_id: str) -> Optional[Shop]:
        """
        Find the shop associated with an owner.

        Args:
            owner_user_id: Owner's user identifier

        Returns:
            The first matching shop, or None
        """
        pass
