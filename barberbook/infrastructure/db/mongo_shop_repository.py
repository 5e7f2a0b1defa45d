"""
MongoDB Shop Repository
=======================

Concrete implementation of ShopRepository using MongoDB.
"""
from typing import Optional

from pymongo.errors import PyMongoError

from barberbook.domain.constants.shop_fields import ShopFields
from barberbook.domain.models.shop import Shop
from barberbook.domain.repositories.shop_repository import ShopRepository
from barberbook.infrastructure.db.base_mongo_repository import BaseMongoRepository


class MongoShopRepository(BaseMongoRepository, ShopRepository):
    """
    MongoDB implementation of ShopRepository.

    Owner uniqueness is not backed by an index; callers check first.
    """

    def _to_entity(self, doc: dict) -> Shop:
        """Convert MongoDB document to Shop entity."""
        return Shop(
            id=self._string_id(doc),
            owner_user_id=doc.get(ShopFields.OWNER_USER_ID),
            name=doc.get(ShopFields.NAME),
            created_at=doc.get(ShopFields.CREATED_AT),
        )

    def _to_document(self, shop: Shop) -> dict:
        """Convert Shop entity to MongoDB document."""
        return {
            ShopFields.OWNER_USER_ID: shop.owner_user_id,
            ShopFields.NAME: shop.name,
            ShopFields.CREATED_AT: shop.created_at,
        }

    async def create(self, shop: Shop) -> str:
        """Create a new shop."""
        try:
            result = await self._collection.insert_one(self._to_document(shop))
        except PyMongoError as e:
            raise self._store_failure("create", e, owner_user_id=shop.owner_user_id) from e
        shop.id = str(result.inserted_id)
        return shop.id

    async def find_by_id(self, shop_id: str) -> Optional[Shop]:
        """Find a shop by its ID."""
        object_id = self._object_id(shop_id)
        if object_id is None:
            return None
        try:
            doc = await self._collection.find_one({ShopFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise self._store_failure("find_by_id", e, shop_id=shop_id) from e
        return self._to_entity(doc) if doc else None

    async def find_by_owner(self, owner_user_id: str) -> Optional[Shop]:
        """Find the shop associated with an owner."""
        try:
            doc = await self._collection.find_one({ShopFields.OWNER_USER_ID: owner_user_id})
        except PyMongoError as e:
            raise self._store_failure("find_by_owner", e, owner_user_id=owner_user_id) from e
        return self._to_entity(doc) if doc else None
