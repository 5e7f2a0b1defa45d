"""
Booking Repository Interface
============================

Abstract interface for booking data access, scoped by shop.
"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from barberbook.domain.models.booking import Booking


class BookingRepository(ABC):
    """
    Abstract repository for booking persistence operations.

    Creation does not look for overlapping bookings.
    """

    @abstractmethod
    async def create(self, booking: Booking) -> str:
        """Create a booking under ``booking.shop_id`` and return its generated id."""
        pass

    @abstractmethod
    async def find_by_id(self, shop_id: str, booking_id: str) -> Optional[Booking]:
        """Find a booking of the given shop, or None."""
        pass

    @abstractmethod
    async def list_by_shop(self, shop_id: str) -> List[Booking]:
        """List every booking of the given shop."""
        pass

    @abstractmethod
    async def find_by_start_range(
        self,
        shop_id: str,
        start: datetime,
        end: datetime,
    ) -> List[Booking]:
        """
        Find bookings of a shop whose start time lies in [start, end].

        Both bounds are inclusive. Result order is whatever the store returns.
        """
        pass
