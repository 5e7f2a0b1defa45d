"""
Dependency Container
====================

FastAPI dependency getters backed by the DI container.
Tests replace these through ``app.dependency_overrides``.
"""
from barberbook.application.services.booking_service import BookingService
from barberbook.application.services.catalog_service import CatalogService
from barberbook.application.services.operator_service import OperatorService
from barberbook.application.services.shop_service import ShopService
from barberbook.application.services.slot_service import SlotService
from barberbook.di.container import get_container


def get_shop_service() -> ShopService:
    """
    Get shop service instance (singleton).

    Returns:
        ShopService instance
    """
    return get_container().get(ShopService)


def get_operator_service() -> OperatorService:
    """
    Get operator service instance (singleton).

    Returns:
        OperatorService instance
    """
    return get_container().get(OperatorService)


def get_catalog_service() -> CatalogService:
    """
    Get service catalog instance (singleton).

    Returns:
        CatalogService instance
    """
    return get_container().get(CatalogService)


def get_booking_service() -> BookingService:
    """
    Get booking service instance (singleton).

    Returns:
        BookingService instance
    """
    return get_container().get(BookingService)


def get_slot_service() -> SlotService:
    return get_container().get(SlotService)
