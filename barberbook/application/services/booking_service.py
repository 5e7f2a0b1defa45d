"""
Booking Service
===============

Application service that coordinates booking operations.
"""
from typing import Any, List

from barberbook.application.use_cases.booking.create_booking import (
    BookingConfirmation,
    CreateBookingUseCase,
)
from barberbook.application.use_cases.booking.list_bookings_for_day import (
    ListBookingsForDayUseCase,
)
from barberbook.domain.models.booking import Booking
from barberbook.domain.repositories.booking_repository import BookingRepository
from barberbook.domain.repositories.service_repository import ServiceRepository


class BookingService:
    """
    Application service for booking operations.

    Bookings depend on the service catalog (for durations), so both
    repositories are required.
    """

    def __init__(
        self,
        booking_repository: BookingRepository,
        service_repository: ServiceRepository,
    ):
        """
        Initialize service with repositories.

        Args:
            booking_repository: Repository for booking persistence
            service_repository: Repository the service durations are read from
        """
        self._create_use_case = CreateBookingUseCase(booking_repository, service_repository)
        self._list_for_day_use_case = ListBookingsForDayUseCase(booking_repository)

    async def create_booking(
        self,
        shop_id: Any,
        customer_name: Any,
        customer_phone: Any,
        service_id: Any,
        operator_id: Any,
        start_time: Any,
        notes: Any = None,
    ) -> BookingConfirmation:
        """
        Create a booking.

        Returns:
            BookingConfirmation with booking id and computed end time
        """
        return await self._create_use_case.execute(
            shop_id=shop_id,
            customer_name=customer_name,
            customer_phone=customer_phone,
            service_id=service_id,
            operator_id=operator_id,
            start_time=start_time,
            notes=notes,
        )

    async def list_bookings_for_day(self, shop_id: Any, date: Any) -> List[Booking]:
        """
        List a shop's bookings for one UTC calendar day.

        Args:
            shop_id: Shop identifier
            date: Day as "YYYY-MM-DD"

        Returns:
            List of booking entities
        """
        return await self._list_for_day_use_case.execute(shop_id=shop_id, date=date)
