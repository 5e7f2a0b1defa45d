"""
Create Operator Use Case
========================

Adds an operator to a shop's staff.
"""
import logging
from typing import Any

from barberbook.application.validation import (
    optional_object,
    require_string,
    require_string_array,
)
from barberbook.domain.models.operator import Operator
from barberbook.domain.repositories.operator_repository import OperatorRepository

logger = logging.getLogger(__name__)


class CreateOperatorUseCase:
    """
    Use case for creating an operator.

    The listed service ids are stored as given; they are not checked
    against the shop's service catalog.
    """

    def __init__(self, operator_repository: OperatorRepository):
        self._repository = operator_repository

    async def execute(
        self,
        shop_id: Any,
        name: Any,
        service_ids: Any,
        working_hours: Any = None,
    ) -> str:
        """
        Execute the create operator use case.

        Args:
            shop_id: Raw parent shop id
            name: Raw operator name
            service_ids: Raw list of service ids ("servicesIds" on the wire)
            working_hours: Raw working hours object, optional

        Returns:
            Generated operator id

        Raises:
            ValidationFailure: On the first invalid field
        """
        operator = Operator(
            shop_id=require_string(shop_id, "shopId"),
            name=require_string(name, "name"),
            service_ids=require_string_array(service_ids, "servicesIds"),
            working_hours=optional_object(working_hours, "workingHours"),
        )

        operator_id = await self._repository.create(operator)
        logger.info(f"Operator {operator_id} created in shop {operator.shop_id}")
        return operator_id
