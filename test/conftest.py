import itertools
from datetime import datetime
from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from barberbook.api.v1.dependencies import (
    get_booking_service,
    get_catalog_service,
    get_operator_service,
    get_shop_service,
    get_slot_service,
)
from barberbook.application.services.booking_service import BookingService
from barberbook.application.services.catalog_service import CatalogService
from barberbook.application.services.operator_service import OperatorService
from barberbook.application.services.shop_service import ShopService
from barberbook.application.services.slot_service import SlotService
from barberbook.domain.models.booking import Booking
from barberbook.domain.models.operator import Operator
from barberbook.domain.models.service import Service
from barberbook.domain.models.shop import Shop
from barberbook.domain.repositories.booking_repository import BookingRepository
from barberbook.domain.repositories.operator_repository import OperatorRepository
from barberbook.domain.repositories.service_repository import ServiceRepository
from barberbook.domain.repositories.shop_repository import ShopRepository
from barberbook.infrastructure.slots.placeholder_slot_provider import PlaceholderSlotProvider
from barberbook.main import create_application

_ids = itertools.count(1)


def _next_id(prefix: str) -> str:
    return f"{prefix}-{next(_ids)}"


# ---------------------------------------------------------------------------
# In-memory repositories
# ---------------------------------------------------------------------------


class InMemoryShopRepository(ShopRepository):
    def __init__(self) -> None:
        self.records: Dict[str, Shop] = {}
        self.calls: List[str] = []

    async def create(self, shop: Shop) -> str:
        self.calls.append("create")
        shop.id = _next_id("shop")
        self.records[shop.id] = shop
        return shop.id

    async def find_by_id(self, shop_id: str) -> Optional[Shop]:
        self.calls.append("find_by_id")
        return self.records.get(shop_id)

    async def find_by_owner(self, owner_user_id: str) -> Optional[Shop]:
        self.calls.append("find_by_owner")
        for shop in self.records.values():
            if shop.owner_user_id == owner_user_id:
                return shop
        return None


class InMemoryOperatorRepository(OperatorRepository):
    def __init__(self) -> None:
        self.records: Dict[str, Operator] = {}

    async def create(self, operator: Operator) -> str:
        operator.id = _next_id("operator")
        self.records[operator.id] = operator
        return operator.id

    async def find_by_id(self, shop_id: str, operator_id: str) -> Optional[Operator]:
        operator = self.records.get(operator_id)
        return operator if operator and operator.shop_id == shop_id else None

    async def list_by_shop(self, shop_id: str) -> List[Operator]:
        return [op for op in self.records.values() if op.shop_id == shop_id]


class InMemoryServiceRepository(ServiceRepository):
    def __init__(self) -> None:
        self.records: Dict[str, Service] = {}
        self.calls: List[str] = []

    async def create(self, service: Service) -> str:
        self.calls.append("create")
        service.id = _next_id("service")
        self.records[service.id] = service
        return service.id

    async def find_by_id(self, shop_id: str, service_id: str) -> Optional[Service]:
        self.calls.append("find_by_id")
        service = self.records.get(service_id)
        return service if service and service.shop_id == shop_id else None

    async def list_by_shop(self, shop_id: str) -> List[Service]:
        self.calls.append("list_by_shop")
        return [s for s in self.records.values() if s.shop_id == shop_id]

    def add_raw(self, shop_id: str, duration_minutes: Any, name: str = "Legacy") -> str:
        """Store a service bypassing validation, the way another writer could."""
        service = Service(shop_id=shop_id, name=name, duration_minutes=duration_minutes, price=10)
        service.id = _next_id("service")
        self.records[service.id] = service
        return service.id


class InMemoryBookingRepository(BookingRepository):
    def __init__(self) -> None:
        self.records: Dict[str, Booking] = {}
        self.calls: List[str] = []

    async def create(self, booking: Booking) -> str:
        self.calls.append("create")
        booking.id = _next_id("booking")
        self.records[booking.id] = booking
        return booking.id

    async def find_by_id(self, shop_id: str, booking_id: str) -> Optional[Booking]:
        self.calls.append("find_by_id")
        booking = self.records.get(booking_id)
        return booking if booking and booking.shop_id == shop_id else None

    async def list_by_shop(self, shop_id: str) -> List[Booking]:
        self.calls.append("list_by_shop")
        return [b for b in self.records.values() if b.shop_id == shop_id]

    async def find_by_start_range(self, shop_id: str, start: datetime, end: datetime) -> List[Booking]:
        self.calls.append("find_by_start_range")
        return [
            b for b in self.records.values()
            if b.shop_id == shop_id and start <= b.start_time <= end
        ]


# ---------------------------------------------------------------------------
# Fake async MongoDB collection (only what the repositories use)
# ---------------------------------------------------------------------------


class _InsertResult:
    def __init__(self, inserted_id: ObjectId) -> None:
        self.inserted_id = inserted_id


class _FakeCursor:
    def __init__(self, docs: List[dict]) -> None:
        self._docs = docs

    async def to_list(self, length: Optional[int] = None) -> List[dict]:
        return list(self._docs if length is None else self._docs[:length])


def _matches(doc: dict, query: dict) -> bool:
    for key, expected in query.items():
        actual = doc.get(key)
        if isinstance(expected, dict):
            if actual is None:
                return False
            if "$gte" in expected and not actual >= expected["$gte"]:
                return False
            if "$lte" in expected and not actual <= expected["$lte"]:
                return False
        elif actual != expected:
            return False
    return True


class FakeAsyncCollection:
    def __init__(self, name: str) -> None:
        self.name = name
        self.docs: List[dict] = []
        self.queries: List[dict] = []
        self.fail_with: Optional[Exception] = None

    def _check_failure(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    async def insert_one(self, doc: dict) -> _InsertResult:
        self._check_failure()
        stored = dict(doc)
        stored["_id"] = ObjectId()
        self.docs.append(stored)
        return _InsertResult(stored["_id"])

    async def find_one(self, query: dict) -> Optional[dict]:
        self._check_failure()
        self.queries.append(query)
        for doc in self.docs:
            if _matches(doc, query):
                return dict(doc)
        return None

    def find(self, query: dict) -> _FakeCursor:
        self._check_failure()
        self.queries.append(query)
        return _FakeCursor([dict(doc) for doc in self.docs if _matches(doc, query)])


class FakeAsyncDatabase:
    def __init__(self) -> None:
        self.collections: Dict[str, FakeAsyncCollection] = {}

    def __getitem__(self, name: str) -> FakeAsyncCollection:
        if name not in self.collections:
            self.collections[name] = FakeAsyncCollection(name)
        return self.collections[name]


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def repos() -> SimpleNamespace:
    return SimpleNamespace(
        shops=InMemoryShopRepository(),
        operators=InMemoryOperatorRepository(),
        services=InMemoryServiceRepository(),
        bookings=InMemoryBookingRepository(),
    )


@pytest.fixture
def fake_database() -> FakeAsyncDatabase:
    return FakeAsyncDatabase()


@pytest.fixture
def app(repos):
    application = create_application()
    application.dependency_overrides[get_shop_service] = lambda: ShopService(repos.shops)
    application.dependency_overrides[get_operator_service] = lambda: OperatorService(repos.operators)
    application.dependency_overrides[get_catalog_service] = lambda: CatalogService(repos.services)
    application.dependency_overrides[get_booking_service] = lambda: BookingService(
        repos.bookings, repos.services
    )
    application.dependency_overrides[get_slot_service] = lambda: SlotService(PlaceholderSlotProvider())
    return application


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
