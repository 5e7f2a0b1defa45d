from typing import TYPE_CHECKING

from ...domain.repositories.booking_repository import BookingRepository
from ...domain.repositories.operator_repository import OperatorRepository
from ...domain.repositories.service_repository import ServiceRepository
from ...domain.repositories.shop_repository import ShopRepository
from ...domain.repositories.slot_provider import SlotProvider
from ...infrastructure.db.mongo_booking_repository import MongoBookingRepository
from ...infrastructure.db.mongo_operator_repository import MongoOperatorRepository
from ...infrastructure.db.mongo_service_repository import MongoServiceRepository
from ...infrastructure.db.mongo_shop_repository import MongoShopRepository
from ...infrastructure.slots.placeholder_slot_provider import PlaceholderSlotProvider
from .database_provider import DatabaseProvider

if TYPE_CHECKING:
    from ..container import DIContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "DIContainer") -> None:
        """
        Register all repository implementations.
        Every repository shares the database handle from the database provider.
        """
        database = container.get(DatabaseProvider.DATABASE_KEY)
        settings = container.settings

        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(
            ShopRepository,
            MongoShopRepository(database, settings.shops_collection),
        )
        container.register_singleton(
            OperatorRepository,
            MongoOperatorRepository(database, settings.operators_collection),
        )
        container.register_singleton(
            ServiceRepository,
            MongoServiceRepository(database, settings.services_collection),
        )
        container.register_singleton(
            BookingRepository,
            MongoBookingRepository(database, settings.bookings_collection),
        )
        container.register_singleton(SlotProvider, PlaceholderSlotProvider())
