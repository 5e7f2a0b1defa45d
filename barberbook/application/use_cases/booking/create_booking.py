"""
Create Booking Use Case
=======================

Validates a booking request, derives its end time from the referenced
service and persists it.

Steps:
1. Validate shopId, customerName, customerPhone, serviceId, operatorId and
   startTime (first failure wins), default notes to ""
2. Load the service under the shop (absent -> ServiceNotFound)
3. Check the stored duration (unusable or too large -> InvalidServiceConfiguration)
4. endTime = startTime + durationMinutes
5. Persist the booking
"""
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from barberbook.application.validation import (
    optional_string,
    require_datetime,
    require_string,
)
from barberbook.domain.exceptions import InvalidServiceConfiguration, ServiceNotFound
from barberbook.domain.models.booking import Booking
from barberbook.domain.repositories.booking_repository import BookingRepository
from barberbook.domain.repositories.service_repository import ServiceRepository
from barberbook.utils.datetime_utils import add_minutes

logger = logging.getLogger(__name__)


@dataclass
class BookingConfirmation:
    booking_id: str
    end_time: datetime


class CreateBookingUseCase:
    """
    Use case for creating a booking.

    The operator id is stored without checking that the operator exists,
    and no overlap with other bookings of the same operator is checked.
    """

    def __init__(
        self,
        booking_repository: BookingRepository,
        service_repository: ServiceRepository,
    ):
        """
        Initialize use case with repositories.

        Args:
            booking_repository: Repository the booking is written to
            service_repository: Repository the service duration is read from
        """
        self._bookings = booking_repository
        self._services = service_repository

    async def execute(
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
        Execute the create booking use case.

        All arguments are raw request values.

        Returns:
            BookingConfirmation with the generated id and computed end time

        Raises:
            ValidationFailure: On the first invalid field
            ServiceNotFound: If the service does not exist under the shop
            InvalidServiceConfiguration: If the stored service duration is unusable
            StoreFailure: If the store cannot be read or written
        """
        shop = require_string(shop_id, "shopId")
        customer = require_string(customer_name, "customerName")
        phone = require_string(customer_phone, "customerPhone")
        service_key = require_string(service_id, "serviceId")
        operator = require_string(operator_id, "operatorId")
        start = require_datetime(start_time, "startTime")
        booking_notes = optional_string(notes, default="")

        service = await self._services.find_by_id(shop, service_key)
        if service is None:
            raise ServiceNotFound(service_key)

        if not service.has_valid_duration():
            logger.error(
                f"Service {service_key} in shop {shop} has unusable durationMinutes "
                f"{service.duration_minutes!r}"
            )
            raise InvalidServiceConfiguration(shop, service_key)

        try:
            end = add_minutes(start, service.duration_minutes)
        except OverflowError as e:
            logger.error(
                f"Service {service_key} in shop {shop} has durationMinutes "
                f"{service.duration_minutes!r} that puts the end time out of range: {e}"
            )
            raise InvalidServiceConfiguration(shop, service_key) from e

        booking = Booking(
            shop_id=shop,
            customer_name=customer,
            customer_phone=phone,
            service_id=service_key,
            operator_id=operator,
            start_time=start,
            end_time=end,
            notes=booking_notes,
        )
        booking_id = await self._bookings.create(booking)
        logger.info(f"Booking {booking_id} created in shop {shop} for service {service_key}")

        return BookingConfirmation(booking_id=booking_id, end_time=end)
