"""
Operator Repository Interface
=============================

Abstract interface for operator data access, scoped by shop.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from barberbook.domain.models.operator import Operator


class OperatorRepository(ABC):
    """Abstract repository for operator persistence operations."""

    @abstractmethod
    async def create(self, operator: Operator) -> str:
        """Create an operator under ``operator.shop_id`` and return its generated id."""
        pass

    @abstractmethod
    async def find_by_id(self, shop_id: str, operator_id: str) -> Optional[Operator]:
        """Find an operator of the given shop, or None."""
        pass

    @abstractmethod
    async def list_by_shop(self, shop_id: str) -> List[Operator]:
        """List every operator of the given shop."""
        pass
