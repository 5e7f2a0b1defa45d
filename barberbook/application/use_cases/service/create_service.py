"""
Create Service Use Case
=======================

Adds a bookable service to a shop's catalog.
"""
import logging
from typing import Any

from barberbook.application.validation import require_number, require_string
from barberbook.domain.models.service import Service
from barberbook.domain.repositories.service_repository import ServiceRepository

logger = logging.getLogger(__name__)


class CreateServiceUseCase:
    """
    Use case for creating a service.

    Duration must be strictly positive and price non-negative; these bounds
    are only enforced here, at creation time.
    """

    def __init__(self, service_repository: ServiceRepository):
        self._repository = service_repository

    async def execute(self, shop_id: Any, name: Any, duration_minutes: Any, price: Any) -> str:
        """
        Execute the create service use case.

        Returns:
            Generated service id

        Raises:
            ValidationFailure: On the first invalid field
        """
        service = Service(
            shop_id=require_string(shop_id, "shopId"),
            name=require_string(name, "name"),
            duration_minutes=require_number(duration_minutes, "durationMinutes", minimum=0, exclusive=True),
            price=require_number(price, "price", minimum=0),
        )

        service_id = await self._repository.create(service)
        logger.info(f"Service {service_id} created in shop {service.shop_id}")
        return service_id
