"""Tests for the order, user and inventory repositories against in-memory SQLite."""

from decimal import Decimal

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from commerce_api.domain.entities import InventoryItem, Order, OrderLine, Role, User
from commerce_api.infrastructure.database.base import Base
from commerce_api.infrastructure.database.repositories import (
    SQLAlchemyInventoryRepository,
    SQLAlchemyOrderRepository,
    SQLAlchemyUserRepository,
)


@pytest_asyncio.fixture
async def session():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session
    await engine.dispose()


# ── Orders ───────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_order_lines_survive_reload_in_order(session):
    repository = SQLAlchemyOrderRepository(session)
    order = Order(
        client_id="c1",
        lines=[
            OrderLine("Widget", 2, Decimal("1.50")),
            OrderLine("Gadget", 1, Decimal("7.00")),
        ],
    )
    await repository.create(order)
    session.expunge_all()

    loaded = await repository.get_by_id(order.id)

    assert loaded is not None
    assert loaded.lines == order.lines
    assert loaded.total == Decimal("10.00")


@pytest.mark.asyncio
async def test_orders_are_listed_per_client(session):
    repository = SQLAlchemyOrderRepository(session)
    await repository.create(Order(client_id="c1", lines=[OrderLine("A", 1, Decimal("1.00"))]))
    await repository.create(Order(client_id="c2", lines=[OrderLine("B", 1, Decimal("2.00"))]))

    orders = await repository.get_by_client_id("c1")

    assert [o.client_id for o in orders] == ["c1"]
    assert await repository.get_by_id("missing") is None


# ── Users ────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_user_lookup_by_email_and_role(session):
    repository = SQLAlchemyUserRepository(session)
    admin = await repository.create(User(email="admin@mail.com", password_hash="h", role=Role.ADMIN))
    await repository.create(User(email="bob@mail.com", password_hash="h"))

    assert await repository.exists_by_email("admin@mail.com")
    assert not await repository.exists_by_email("nobody@mail.com")
    assert (await repository.get_by_email("admin@mail.com")).id == admin.id
    assert [u.email for u in await repository.get_all_by_role(Role.ADMIN)] == ["admin@mail.com"]


@pytest.mark.asyncio
async def test_user_delete_reports_missing_user(session):
    repository = SQLAlchemyUserRepository(session)
    user = await repository.create(User(email="bob@mail.com", password_hash="h"))

    assert await repository.delete(user.id) is True
    assert await repository.delete(user.id) is False
    assert await repository.get_by_id(user.id) is None


# ── Inventory ────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_inventory_update_persists_new_price(session):
    repository = SQLAlchemyInventoryRepository(session)
    item = await repository.create(InventoryItem(item="Widget", sale_price=Decimal("9.99")))

    item.update(sale_price=Decimal("12.50"))
    await repository.update(item)
    session.expunge_all()

    loaded = await repository.get_by_name("Widget")
    assert loaded is not None
    assert loaded.sale_price == Decimal("12.50")


@pytest.mark.asyncio
async def test_inventory_listing_is_sorted_and_paged(session):
    repository = SQLAlchemyInventoryRepository(session)
    for name in ("Gadget", "Anvil", "Widget"):
        await repository.create(InventoryItem(item=name, sale_price=Decimal("1.00")))

    page = await repository.get_all(skip=1, limit=1)

    assert [i.item for i in page] == ["Gadget"]
    assert await repository.delete("missing") is False
