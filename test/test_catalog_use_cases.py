import pytest

from barberbook.application.services.catalog_service import CatalogService
from barberbook.application.services.operator_service import OperatorService
from barberbook.application.services.shop_service import ShopService
from barberbook.domain.exceptions import ValidationFailure


@pytest.mark.asyncio
async def test_register_shop_creates_once_per_owner(repos):
    service = ShopService(repos.shops)

    first = await service.register_shop(uid="owner-1", name="Fade Factory")
    second = await service.register_shop(uid="owner-1", name="Another Name")

    assert first.already_exists is False
    assert second.already_exists is True
    assert second.shop_id == first.shop_id
    assert len(repos.shops.records) == 1
    assert repos.shops.records[first.shop_id].name == "Fade Factory"


@pytest.mark.asyncio
async def test_register_shop_validates_before_lookup(repos):
    service = ShopService(repos.shops)

    with pytest.raises(ValidationFailure) as exc_info:
        await service.register_shop(uid="owner-1", name="   ")

    assert exc_info.value.field == "name"
    assert repos.shops.calls == []


@pytest.mark.asyncio
async def test_get_shop_by_owner(repos):
    service = ShopService(repos.shops)
    registration = await service.register_shop(uid="owner-1", name="Fade Factory")

    shop = await service.get_shop_by_owner("owner-1")

    assert shop.id == registration.shop_id
    assert shop.created_at.tzinfo is not None
    assert await service.get_shop_by_owner("owner-2") is None


@pytest.mark.asyncio
async def test_create_operator_defaults_working_hours(repos):
    service = OperatorService(repos.operators)

    operator_id = await service.create_operator(shop_id="shop-a", name="Marco", service_ids=["s-1", "s-2"])

    operator = repos.operators.records[operator_id]
    assert operator.service_ids == ["s-1", "s-2"]
    assert operator.working_hours == {}


@pytest.mark.asyncio
async def test_create_operator_rejects_array_working_hours(repos):
    service = OperatorService(repos.operators)

    with pytest.raises(ValidationFailure) as exc_info:
        await service.create_operator(shop_id="shop-a", name="Marco", service_ids=[], working_hours=[])

    assert exc_info.value.field == "workingHours"
    assert repos.operators.records == {}


@pytest.mark.asyncio
async def test_list_operators_is_scoped_to_shop(repos):
    service = OperatorService(repos.operators)
    await service.create_operator(shop_id="shop-a", name="Marco", service_ids=[])
    await service.create_operator(shop_id="shop-b", name="Gianni", service_ids=[])

    operators = await service.list_operators("shop-a")

    assert [op.name for op in operators] == ["Marco"]


@pytest.mark.asyncio
async def test_create_service_boundaries(repos):
    catalog = CatalogService(repos.services)

    service_id = await catalog.create_service(shop_id="shop-a", name="Line up", duration_minutes=0.01, price=0)
    assert repos.services.records[service_id].duration_minutes == 0.01

    with pytest.raises(ValidationFailure) as exc_info:
        await catalog.create_service(shop_id="shop-a", name="Free", duration_minutes=0, price=0)
    assert exc_info.value.field == "durationMinutes"

    with pytest.raises(ValidationFailure) as exc_info:
        await catalog.create_service(shop_id="shop-a", name="Refund", duration_minutes=10, price=-0.01)
    assert exc_info.value.field == "price"


@pytest.mark.asyncio
async def test_list_services_requires_shop_id(repos):
    catalog = CatalogService(repos.services)

    with pytest.raises(ValidationFailure):
        await catalog.list_services("")

    assert repos.services.calls == []
