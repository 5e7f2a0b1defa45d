"""
List Bookings For Day Use Case
==============================

Returns a shop's bookings starting within one calendar day (UTC).
"""
from typing import Any, List

from barberbook.application.validation import require_day, require_string
from barberbook.domain.models.booking import Booking
from barberbook.domain.repositories.booking_repository import BookingRepository
from barberbook.utils.datetime_utils import utc_day_range


class ListBookingsForDayUseCase:
    """Use case for the day-range booking query."""

    def __init__(self, booking_repository: BookingRepository):
        self._repository = booking_repository

    async def execute(self, shop_id: Any, date: Any) -> List[Booking]:
        """
        Execute the day-range query.

        Args:
            shop_id: Raw shop id
            date: Raw "YYYY-MM-DD" text

        Returns:
            Bookings whose start time is within [00:00:00.000, 23:59:59.999] UTC
            of that day, in store order
        """
        shop = require_string(shop_id, "shopId")
        day_start = require_day(date, "date")
        start, end = utc_day_range(day_start)
        return await self._repository.find_by_start_range(shop, start, end)
