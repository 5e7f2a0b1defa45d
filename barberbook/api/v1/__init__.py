"""
API v1 Package
===============

Version 1 API controllers.
"""
from .shop_controller import router as shop_router
from .operator_controller import router as operator_router
from .service_controller import router as service_router
from .booking_controller import router as booking_router
from .slot_controller import router as slot_router

__all__ = ["shop_router", "operator_router", "service_router", "booking_router", "slot_router"]
