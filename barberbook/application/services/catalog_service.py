"""
Catalog Service
===============

Application service for a shop's service catalog.
"""
from typing import Any, List

from barberbook.application.use_cases.service.create_service import CreateServiceUseCase
from barberbook.application.validation import require_string
from barberbook.domain.models.service import Service
from barberbook.domain.repositories.service_repository import ServiceRepository


class CatalogService:
    def __init__(self, service_repository: ServiceRepository):
        self._repository = service_repository
        self._create_use_case = CreateServiceUseCase(service_repository)

    async def create_service(self, shop_id: Any, name: Any, duration_minutes: Any, price: Any) -> str:
        """Add a service to the catalog and return its id."""
        return await self._create_use_case.execute(
            shop_id=shop_id,
            name=name,
            duration_minutes=duration_minutes,
            price=price,
        )

    async def list_services(self, shop_id: Any) -> List[Service]:
        """List the services of a shop."""
        return await self._repository.list_by_shop(require_string(shop_id, "shopId"))
