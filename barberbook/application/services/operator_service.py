"""
Operator Service
================

Application service for a shop's operators.
"""
from typing import Any, List

from barberbook.application.use_cases.operator.create_operator import CreateOperatorUseCase
from barberbook.application.validation import require_string
from barberbook.domain.models.operator import Operator
from barberbook.domain.repositories.operator_repository import OperatorRepository


class OperatorService:
    def __init__(self, operator_repository: OperatorRepository):
        self._repository = operator_repository
        self._create_use_case = CreateOperatorUseCase(operator_repository)

    async def create_operator(
        self,
        shop_id: Any,
        name: Any,
        service_ids: Any,
        working_hours: Any = None,
    ) -> str:
        """Create an operator and return its id."""
        return await self._create_use_case.execute(
            shop_id=shop_id,
            name=name,
            service_ids=service_ids,
            working_hours=working_hours,
        )

    async def list_operators(self, shop_id: Any) -> List[Operator]:
        """List the operators of a shop."""
        return await self._repository.list_by_shop(require_string(shop_id, "shopId"))
