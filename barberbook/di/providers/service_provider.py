from typing import TYPE_CHECKING

from ...application.services.booking_service import BookingService
from ...application.services.catalog_service import CatalogService
from ...application.services.operator_service import OperatorService
from ...application.services.shop_service import ShopService
from ...application.services.slot_service import SlotService
from ...domain.repositories.booking_repository import BookingRepository
from ...domain.repositories.operator_repository import OperatorRepository
from ...domain.repositories.service_repository import ServiceRepository
from ...domain.repositories.shop_repository import ShopRepository
from ...domain.repositories.slot_provider import SlotProvider

if TYPE_CHECKING:
    from ..container import DIContainer


class ServiceProvider:
    """Application service provider - builds services from registered repositories"""

    @staticmethod
    def register(container: "DIContainer") -> None:
        container.register_singleton(
            ShopService,
            ShopService(shop_repository=container.get(ShopRepository)),
        )
        container.register_singleton(
            OperatorService,
            OperatorService(operator_repository=container.get(OperatorRepository)),
        )
        container.register_singleton(
            CatalogService,
            CatalogService(service_repository=container.get(ServiceRepository)),
        )
        container.register_singleton(
            BookingService,
            BookingService(
                booking_repository=container.get(BookingRepository),
                service_repository=container.get(ServiceRepository),
            ),
        )
        container.register_singleton(
            SlotService,
            SlotService(slot_provider=container.get(SlotProvider)),
        )
