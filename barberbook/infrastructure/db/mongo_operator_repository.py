"""
MongoDB Operator Repository
===========================

Concrete implementation of OperatorRepository using MongoDB.
"""
from typing import List, Optional

from pymongo.errors import PyMongoError

from barberbook.domain.constants.operator_fields import OperatorFields
from barberbook.domain.models.operator import Operator
from barberbook.domain.repositories.operator_repository import OperatorRepository
from barberbook.infrastructure.db.base_mongo_repository import BaseMongoRepository


class MongoOperatorRepository(BaseMongoRepository, OperatorRepository):
    """MongoDB implementation of OperatorRepository."""

    def _to_entity(self, doc: dict) -> Operator:
        return Operator(
            id=self._string_id(doc),
            shop_id=doc.get(OperatorFields.SHOP_ID),
            name=doc.get(OperatorFields.NAME),
            service_ids=doc.get(OperatorFields.SERVICE_IDS) or [],
            working_hours=doc.get(OperatorFields.WORKING_HOURS) or {},
        )

    def _to_document(self, operator: Operator) -> dict:
        return {
            OperatorFields.SHOP_ID: operator.shop_id,
            OperatorFields.NAME: operator.name,
            OperatorFields.SERVICE_IDS: operator.service_ids,
            OperatorFields.WORKING_HOURS: operator.working_hours,
        }

    async def create(self, operator: Operator) -> str:
        try:
            result = await self._collection.insert_one(self._to_document(operator))
        except PyMongoError as e:
            raise self._store_failure("create", e, shop_id=operator.shop_id) from e
        operator.id = str(result.inserted_id)
        return operator.id

    async def find_by_id(self, shop_id: str, operator_id: str) -> Optional[Operator]:
        object_id = self._object_id(operator_id)
        if object_id is None:
            return None
        try:
            doc = await self._collection.find_one(
                {OperatorFields.MONGO_ID: object_id, OperatorFields.SHOP_ID: shop_id}
            )
        except PyMongoError as e:
            raise self._store_failure("find_by_id", e, shop_id=shop_id, operator_id=operator_id) from e
        return self._to_entity(doc) if doc else None

    async def list_by_shop(self, shop_id: str) -> List[Operator]:
        try:
            docs = await self._collection.find({OperatorFields.SHOP_ID: shop_id}).to_list()
        except PyMongoError as e:
            raise self._store_failure("list_by_shop", e, shop_id=shop_id) from e
        return [self._to_entity(doc) for doc in docs]
