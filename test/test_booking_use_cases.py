from datetime import datetime, timezone

import pytest

from barberbook.application.use_cases.booking.create_booking import CreateBookingUseCase
from barberbook.application.use_cases.booking.list_bookings_for_day import (
    ListBookingsForDayUseCase,
)
from barberbook.domain.exceptions import (
    InvalidServiceConfiguration,
    ServiceNotFound,
    ValidationFailure,
)
from barberbook.domain.models.booking import Booking
from barberbook.domain.models.service import Service

UTC = timezone.utc


async def _add_service(repos, shop_id="shop-a", duration=30):
    return await repos.services.create(
        Service(shop_id=shop_id, name="Haircut", duration_minutes=duration, price=20)
    )


def _request(service_id, **overrides):
    payload = {
        "shop_id": "shop-a",
        "customer_name": "Luca Bianchi",
        "customer_phone": "+39 333 1234567",
        "service_id": service_id,
        "operator_id": "operator-1",
        "start_time": "2024-03-15T10:00:00Z",
    }
    payload.update(overrides)
    return payload


@pytest.mark.asyncio
async def test_end_time_is_start_plus_service_duration(repos):
    service_id = await _add_service(repos, duration=45)
    use_case = CreateBookingUseCase(repos.bookings, repos.services)

    confirmation = await use_case.execute(**_request(service_id))

    assert confirmation.end_time == datetime(2024, 3, 15, 10, 45, tzinfo=UTC)
    stored = repos.bookings.records[confirmation.booking_id]
    assert stored.start_time == datetime(2024, 3, 15, 10, 0, tzinfo=UTC)
    assert stored.end_time == confirmation.end_time
    assert stored.service_id == service_id
    assert stored.notes == ""


@pytest.mark.asyncio
async def test_fractional_duration_is_kept_to_the_millisecond(repos):
    service_id = await _add_service(repos, duration=0.01)
    use_case = CreateBookingUseCase(repos.bookings, repos.services)

    confirmation = await use_case.execute(**_request(service_id))

    assert confirmation.end_time == datetime(2024, 3, 15, 10, 0, 0, 600000, tzinfo=UTC)


@pytest.mark.asyncio
async def test_inputs_are_trimmed_and_notes_kept(repos):
    service_id = await _add_service(repos)
    use_case = CreateBookingUseCase(repos.bookings, repos.services)

    confirmation = await use_case.execute(
        **_request(service_id, customer_name="  Luca  ", notes="  allergic to talc ")
    )

    stored = repos.bookings.records[confirmation.booking_id]
    assert stored.customer_name == "Luca"
    assert stored.notes == "  allergic to talc "


@pytest.mark.asyncio
async def test_non_string_notes_default_to_empty(repos):
    service_id = await _add_service(repos)
    use_case = CreateBookingUseCase(repos.bookings, repos.services)

    confirmation = await use_case.execute(**_request(service_id, notes=12))

    assert repos.bookings.records[confirmation.booking_id].notes == ""


@pytest.mark.asyncio
async def test_first_invalid_field_wins_and_store_is_untouched(repos):
    use_case = CreateBookingUseCase(repos.bookings, repos.services)

    with pytest.raises(ValidationFailure) as exc_info:
        await use_case.execute(**_request("whatever", customer_name="", start_time="garbage"))

    assert exc_info.value.field == "customerName"
    assert repos.services.calls == []
    assert repos.bookings.calls == []


@pytest.mark.asyncio
async def test_unparseable_start_time_is_rejected_before_lookup(repos):
    service_id = await _add_service(repos)
    repos.services.calls.clear()
    use_case = CreateBookingUseCase(repos.bookings, repos.services)

    with pytest.raises(ValidationFailure) as exc_info:
        await use_case.execute(**_request(service_id, start_time="next tuesday"))

    assert exc_info.value.field == "startTime"
    assert repos.services.calls == []


@pytest.mark.asyncio
async def test_unknown_service_raises_service_not_found(repos):
    use_case = CreateBookingUseCase(repos.bookings, repos.services)

    with pytest.raises(ServiceNotFound) as exc_info:
        await use_case.execute(**_request("service-missing"))

    assert exc_info.value.status_code == 400
    assert repos.bookings.calls == []


@pytest.mark.asyncio
async def test_service_of_another_shop_is_not_found(repos):
    other_shop_service = await _add_service(repos, shop_id="shop-b")
    use_case = CreateBookingUseCase(repos.bookings, repos.services)

    with pytest.raises(ServiceNotFound):
        await use_case.execute(**_request(other_shop_service))


@pytest.mark.asyncio
async def test_operator_is_not_resolved(repos):
    service_id = await _add_service(repos)
    use_case = CreateBookingUseCase(repos.bookings, repos.services)

    confirmation = await use_case.execute(**_request(service_id, operator_id="nobody-works-here"))

    assert repos.bookings.records[confirmation.booking_id].operator_id == "nobody-works-here"


@pytest.mark.asyncio
async def test_overlapping_bookings_are_both_accepted(repos):
    service_id = await _add_service(repos, duration=60)
    use_case = CreateBookingUseCase(repos.bookings, repos.services)

    first = await use_case.execute(**_request(service_id))
    second = await use_case.execute(**_request(service_id, start_time="2024-03-15T10:30:00Z"))

    assert first.booking_id != second.booking_id
    assert len(repos.bookings.records) == 2


@pytest.mark.asyncio
@pytest.mark.parametrize("duration", [0, -10, None, "30", True, float("nan")])
async def test_unusable_stored_duration_is_a_server_error(repos, duration):
    service_id = repos.services.add_raw("shop-a", duration)
    use_case = CreateBookingUseCase(repos.bookings, repos.services)

    with pytest.raises(InvalidServiceConfiguration) as exc_info:
        await use_case.execute(**_request(service_id))

    assert exc_info.value.status_code == 500
    assert repos.bookings.records == {}


@pytest.mark.asyncio
@pytest.mark.parametrize("duration", [1e12, 10**400])
async def test_duration_past_the_calendar_is_a_server_error(repos, duration):
    service_id = repos.services.add_raw("shop-a", duration)
    use_case = CreateBookingUseCase(repos.bookings, repos.services)

    with pytest.raises(InvalidServiceConfiguration) as exc_info:
        await use_case.execute(**_request(service_id))

    assert exc_info.value.service_id == service_id
    assert repos.bookings.records == {}


def _booking(start: datetime, shop_id: str = "shop-a") -> Booking:
    return Booking(
        shop_id=shop_id,
        customer_name="C",
        customer_phone="1",
        service_id="s",
        operator_id="o",
        start_time=start,
        end_time=start,
    )


@pytest.mark.asyncio
async def test_day_query_is_inclusive_on_both_ends(repos):
    inside = [
        datetime(2024, 3, 15, 0, 0, 0, tzinfo=UTC),
        datetime(2024, 3, 15, 12, 0, tzinfo=UTC),
        datetime(2024, 3, 15, 23, 59, 59, 999000, tzinfo=UTC),
    ]
    outside = [
        datetime(2024, 3, 14, 23, 59, 59, 999000, tzinfo=UTC),
        datetime(2024, 3, 16, 0, 0, 0, tzinfo=UTC),
    ]
    for start in inside + outside:
        await repos.bookings.create(_booking(start))
    await repos.bookings.create(_booking(datetime(2024, 3, 15, 9, 0, tzinfo=UTC), shop_id="shop-b"))

    result = await ListBookingsForDayUseCase(repos.bookings).execute(shop_id="shop-a", date="2024-03-15")

    assert sorted(b.start_time for b in result) == inside


@pytest.mark.asyncio
async def test_day_query_rejects_unpadded_date_before_store_access(repos):
    with pytest.raises(ValidationFailure) as exc_info:
        await ListBookingsForDayUseCase(repos.bookings).execute(shop_id="shop-a", date="2024-3-15")

    assert exc_info.value.field == "date"
    assert repos.bookings.calls == []


@pytest.mark.asyncio
async def test_day_query_requires_shop_id(repos):
    with pytest.raises(ValidationFailure) as exc_info:
        await ListBookingsForDayUseCase(repos.bookings).execute(shop_id=None, date="2024-03-15")

    assert exc_info.value.field == "shopId"
