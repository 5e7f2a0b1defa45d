"""
MongoDB Service Repository
==========================

Concrete implementation of ServiceRepository using MongoDB.
"""
from typing import List, Optional

from pymongo.errors import PyMongoError

from barberbook.domain.constants.service_fields import ServiceFields
from barberbook.domain.models.service import Service
from barberbook.domain.repositories.service_repository import ServiceRepository
from barberbook.infrastructure.db.base_mongo_repository import BaseMongoRepository


class MongoServiceRepository(BaseMongoRepository, ServiceRepository):
    """
    MongoDB implementation of ServiceRepository.

    Documents are mapped without coercion: a missing durationMinutes
    becomes None on the entity.
    """

    def _to_entity(self, doc: dict) -> Service:
        return Service(
            id=self._string_id(doc),
            shop_id=doc.get(ServiceFields.SHOP_ID),
            name=doc.get(ServiceFields.NAME),
            duration_minutes=doc.get(ServiceFields.DURATION_MINUTES),
            price=doc.get(ServiceFields.PRICE),
        )

    def _to_document(self, service: Service) -> dict:
        return {
            ServiceFields.SHOP_ID: service.shop_id,
            ServiceFields.NAME: service.name,
            ServiceFields.DURATION_MINUTES: service.duration_minutes,
            ServiceFields.PRICE: service.price,
        }

    async def create(self, service: Service) -> str:
        try:
            result = await self._collection.insert_one(self._to_document(service))
        except PyMongoError as e:
            raise self._store_failure("create", e, shop_id=service.shop_id) from e
        service.id = str(result.inserted_id)
        return service.id

    async def find_by_id(self, shop_id: str, service_id: str) -> Optional[Service]:
        object_id = self._object_id(service_id)
        if object_id is None:
            return None
        try:
            doc = await self._collection.find_one(
                {ServiceFields.MONGO_ID: object_id, ServiceFields.SHOP_ID: shop_id}
            )
        except PyMongoError as e:
            raise self._store_failure("find_by_id", e, shop_id=shop_id, service_id=service_id) from e
        return self._to_entity(doc) if doc else None

    async def list_by_shop(self, shop_id: str) -> List[Service]:
        try:
            docs = await self._collection.find({ServiceFields.SHOP_ID: shop_id}).to_list()
        except PyMongoError as e:
            raise self._store_failure("list_by_shop", e, shop_id=shop_id) from e
        return [self._to_entity(doc) for doc in docs]
