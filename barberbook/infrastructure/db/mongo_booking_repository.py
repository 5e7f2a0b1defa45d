"""
MongoDB Booking Repository
==========================

Concrete implementation of BookingRepository using MongoDB.
"""
from datetime import datetime
from typing import List, Optional

from pymongo.errors import PyMongoError

from barberbook.domain.constants.booking_fields import BookingFields
from barberbook.domain.models.booking import Booking
from barberbook.domain.repositories.booking_repository import BookingRepository
from barberbook.infrastructure.db.base_mongo_repository import BaseMongoRepository


class MongoBookingRepository(BaseMongoRepository, BookingRepository):
    """
    MongoDB implementation of BookingRepository.

    Start and end times are stored as BSON dates (millisecond precision).
    """

    def _to_entity(self, doc: dict) -> Booking:
        """Convert MongoDB document to Booking entity."""
        return Booking(
            id=self._string_id(doc),
            shop_id=doc.get(BookingFields.SHOP_ID),
            customer_name=doc.get(BookingFields.CUSTOMER_NAME),
            customer_phone=doc.get(BookingFields.CUSTOMER_PHONE),
            service_id=doc.get(BookingFields.SERVICE_ID),
            operator_id=doc.get(BookingFields.OPERATOR_ID),
            start_time=doc.get(BookingFields.START_TIME),
            end_time=doc.get(BookingFields.END_TIME),
            notes=doc.get(BookingFields.NOTES, ""),
        )

    def _to_document(self, booking: Booking) -> dict:
        """Convert Booking entity to MongoDB document."""
        return {
            BookingFields.SHOP_ID: booking.shop_id,
            BookingFields.CUSTOMER_NAME: booking.customer_name,
            BookingFields.CUSTOMER_PHONE: booking.customer_phone,
            BookingFields.SERVICE_ID: booking.service_id,
            BookingFields.OPERATOR_ID: booking.operator_id,
            BookingFields.START_TIME: booking.start_time,
            BookingFields.END_TIME: booking.end_time,
            BookingFields.NOTES: booking.notes,
        }

    async def create(self, booking: Booking) -> str:
        """Create a new booking."""
        try:
            result = await self._collection.insert_one(self._to_document(booking))
        except PyMongoError as e:
            raise self._store_failure(
                "create", e, shop_id=booking.shop_id, service_id=booking.service_id
            ) from e
        booking.id = str(result.inserted_id)
        return booking.id

    async def find_by_id(self, shop_id: str, booking_id: str) -> Optional[Booking]:
        """Find a booking of a shop by its ID."""
        object_id = self._object_id(booking_id)
        if object_id is None:
            return None
        try:
            doc = await self._collection.find_one(
                {BookingFields.MONGO_ID: object_id, BookingFields.SHOP_ID: shop_id}
            )
        except PyMongoError as e:
            raise self._store_failure("find_by_id", e, shop_id=shop_id, booking_id=booking_id) from e
        return self._to_entity(doc) if doc else None

    async def list_by_shop(self, shop_id: str) -> List[Booking]:
        """List all bookings of a shop."""
        try:
            docs = await self._collection.find({BookingFields.SHOP_ID: shop_id}).to_list()
        except PyMongoError as e:
            raise self._store_failure("list_by_shop", e, shop_id=shop_id) from e
        return [self._to_entity(doc) for doc in docs]

    async def find_by_start_range(self, shop_id: str, start: datetime, end: datetime) -> List[Booking]:
        """Find bookings of a shop starting within [start, end], bounds inclusive."""
        query = {
            BookingFields.SHOP_ID: shop_id,
            BookingFields.START_TIME: {"$gte": start, "$lte": end},
        }
        try:
            docs = await self._collection.find(query).to_list()
        except PyMongoError as e:
            raise self._store_failure(
                "find_by_start_range", e, shop_id=shop_id, start=start.isoformat(), end=end.isoformat()
            ) from e
        return [self._to_entity(doc) for doc in docs]
