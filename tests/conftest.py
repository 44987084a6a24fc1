"""In-memory fake repositories and service fixtures shared by the test suite."""

import copy

import pytest

from commerce_api.application.interfaces import (
    ClientRepository,
    InventoryRepository,
    OrderRepository,
    UserRepository,
)
from commerce_api.application.services import (
    ClientService,
    InventoryService,
    OrderService,
    UserService,
)
from commerce_api.domain.entities import ClientRecord, InventoryItem, Order, Role, User


class FakeClientRepository(ClientRepository):
    """Stores deep copies so unsaved mutations never leak into the store."""

    def __init__(self):
        self._records: dict[str, ClientRecord] = {}
        self.save_calls = 0

    def seed(self, record: ClientRecord) -> None:
        self._records[record.id] = copy.deepcopy(record)

    def stored(self, client_id: str) -> ClientRecord | None:
        return self._records.get(client_id)

    async def get_by_id(self, client_id: str) -> ClientRecord | None:
        record = self._records.get(client_id)
        return copy.deepcopy(record) if record else None

    async def get_by_order_id(self, order_id: str) -> ClientRecord | None:
        for record in self._records.values():
            if record.find_order(order_id) is not None:
                return copy.deepcopy(record)
        return None

    async def search(self, keyword: str) -> list[ClientRecord]:
        needle = keyword.lower()
        return [
            copy.deepcopy(r)
            for r in self._records.values()
            if any(
                needle in (value or "").lower()
                for value in (r.first_name, r.last_name, r.email, r.address)
            )
        ]

    async def save(self, record: ClientRecord) -> ClientRecord:
        self.save_calls += 1
        self._records[record.id] = copy.deepcopy(record)
        return copy.deepcopy(record)

    async def delete(self, record: ClientRecord) -> None:
        self._records.pop(record.id, None)

    async def exists(self, client_id: str) -> bool:
        return client_id in self._records


class FakeInventoryRepository(InventoryRepository):

    def __init__(self):
        self._items: dict[str, InventoryItem] = {}

    async def get_by_id(self, item_id: str) -> InventoryItem | None:
        return self._items.get(item_id)

    async def get_by_name(self, item: str) -> InventoryItem | None:
        return next((i for i in self._items.values() if i.item == item), None)

    async def get_all(self, skip: int = 0, limit: int = 100) -> list[InventoryItem]:
        items = sorted(self._items.values(), key=lambda i: i.item)
        return items[skip : skip + limit]

    async def create(self, item: InventoryItem) -> InventoryItem:
        self._items[item.id] = item
        return item

    async def update(self, item: InventoryItem) -> InventoryItem:
        if item.id not in self._items:
            raise ValueError(f"InventoryItem {item.id} not found")
        self._items[item.id] = item
        return item

    async def delete(self, item_id: str) -> bool:
        return self._items.pop(item_id, None) is not None


class FakeOrderRepository(OrderRepository):

    def __init__(self):
        self._orders: dict[str, Order] = {}

    async def get_by_id(self, order_id: str) -> Order | None:
        return self._orders.get(order_id)

    async def get_by_client_id(self, client_id: str) -> list[Order]:
        return [o for o in self._orders.values() if o.client_id == client_id]

    async def create(self, order: Order) -> Order:
        self._orders[order.id] = order
        return order


class FakeUserRepository(UserRepository):

    def __init__(self):
        self._users: dict[str, User] = {}

    async def get_by_id(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    async def get_by_email(self, email: str) -> User | None:
        return next((u for u in self._users.values() if u.email == email), None)

    async def get_all_by_role(self, role: Role) -> list[User]:
        return [u for u in self._users.values() if u.role == role]

    async def exists_by_email(self, email: str) -> bool:
        return await self.get_by_email(email) is not None

    async def create(self, user: User) -> User:
        self._users[user.id] = user
        return user

    async def delete(self, user_id: str) -> bool:
        return self._users.pop(user_id, None) is not None


@pytest.fixture
def client_repo() -> FakeClientRepository:
    return FakeClientRepository()


@pytest.fixture
def client_service(client_repo: FakeClientRepository) -> ClientService:
    return ClientService(client_repo)


@pytest.fixture
def inventory_service() -> InventoryService:
    return InventoryService(FakeInventoryRepository())


@pytest.fixture
def order_service() -> OrderService:
    return OrderService(FakeOrderRepository())


@pytest.fixture
def user_repo() -> FakeUserRepository:
    return FakeUserRepository()


@pytest.fixture
def user_service(user_repo: FakeUserRepository) -> UserService:
    return UserService(user_repo)
