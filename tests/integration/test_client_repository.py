"""Tests for SQLAlchemyClientRepository against an in-memory SQLite database."""

from decimal import Decimal

import pytest
import pytest_asyncio
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from commerce_api.domain.entities import ClientRecord, OrderDetail, OrderStatus
from commerce_api.infrastructure.database.base import Base
from commerce_api.infrastructure.database.models import PendingOrderModel
from commerce_api.infrastructure.database.repositories import SQLAlchemyClientRepository


@pytest_asyncio.fixture
async def session():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session
    await engine.dispose()


@pytest.fixture
def repository(session: AsyncSession) -> SQLAlchemyClientRepository:
    return SQLAlchemyClientRepository(session)


def _ada() -> ClientRecord:
    return ClientRecord(
        id="c1",
        first_name="Ada",
        last_name="Lovelace",
        email="ada@example.com",
        address="London",
        pending_orders=[
            OrderDetail("o1", OrderStatus.PENDING, Decimal("10.00")),
            OrderDetail("o2", OrderStatus.SHIPPED, Decimal("4.50")),
        ],
    )


@pytest.mark.asyncio
async def test_save_and_reload_keeps_order_list(repository, session):
    await repository.save(_ada())
    session.expunge_all()

    loaded = await repository.get_by_id("c1")

    assert loaded == _ada()


@pytest.mark.asyncio
async def test_save_reconciles_child_rows(repository, session):
    await repository.save(_ada())
    session.expunge_all()

    record = await repository.get_by_id("c1")
    record.pending_orders = [
        OrderDetail("o3", OrderStatus.PENDING, Decimal("1.00")),
        OrderDetail("o1", OrderStatus.CANCELLED, Decimal("10.00")),
    ]
    await repository.save(record)
    session.expunge_all()

    loaded = await repository.get_by_id("c1")
    assert [(o.id, o.status) for o in loaded.pending_orders] == [
        ("o3", OrderStatus.PENDING),
        ("o1", OrderStatus.CANCELLED),
    ]
    count = await session.scalar(select(func.count()).select_from(PendingOrderModel))
    assert count == 2


@pytest.mark.asyncio
async def test_get_by_order_id(repository, session):
    await repository.save(_ada())
    await repository.save(ClientRecord(id="c2", first_name="Grace", email="grace@example.com"))
    session.expunge_all()

    owner = await repository.get_by_order_id("o2")

    assert owner is not None
    assert owner.id == "c1"
    assert await repository.get_by_order_id("o404") is None


@pytest.mark.asyncio
async def test_search_is_case_insensitive_across_fields(repository):
    await repository.save(_ada())
    await repository.save(ClientRecord(id="c2", first_name="Grace", address="Arlington"))

    assert [c.id for c in await repository.search("lovelace")] == ["c1"]
    assert [c.id for c in await repository.search("ARLING")] == ["c2"]
    assert [c.id for c in await repository.search("n")] == ["c1", "c2"]
    assert await repository.search("100%") == []


@pytest.mark.asyncio
async def test_exists_and_delete_cascade(repository, session):
    record = await repository.save(_ada())
    assert await repository.exists("c1") is True

    await repository.delete(record)

    assert await repository.exists("c1") is False
    assert await repository.get_by_id("c1") is None
    count = await session.scalar(select(func.count()).select_from(PendingOrderModel))
    assert count == 0
