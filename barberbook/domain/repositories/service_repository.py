"""
Service Repository Interface
============================

Abstract interface for service catalog data access, scoped by shop.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from barberbook.domain.models.service import Service


class ServiceRepository(ABC):
    """Abstract repository for service persistence operations."""

    @abstractmethod
    async def create(self, service: Service) -> str:
        """Create a service under ``service.shop_id`` and return its generated id."""
        pass

    @abstractmethod
    async def find_by_id(self, shop_id: str, service_id: str) -> Optional[Service]:
        """
        Find a service of the given shop.

        Args:
            shop_id: Parent shop identifier
            service_id: Service identifier

        Returns:
            Service entity if it exists under that shop, None otherwise
        """
        pass

    @abstractmethod
    async def list_by_shop(self, shop_id: str) -> List[Service]:
        """List every service of the given shop."""
        pass
