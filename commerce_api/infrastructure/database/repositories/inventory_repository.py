"""Concrete repository implementation for inventory items backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from commerce_api.application.interfaces import InventoryRepository
from commerce_api.domain.entities import InventoryItem
from commerce_api.infrastructure.database.models import InventoryItemModel


class SQLAlchemyInventoryRepository(InventoryRepository):
    """Implements the InventoryRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: InventoryItemModel) -> InventoryItem:
        return InventoryItem(
            id=model.id,
            item=model.item,
            sale_price=model.sale_price,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    async def get_by_id(self, item_id: str) -> InventoryItem | None:
        result = await self._session.get(InventoryItemModel, item_id)
        return self._to_entity(result) if result else None

    async def get_by_name(self, item: str) -> InventoryItem | None:
        stmt = select(InventoryItemModel).where(InventoryItemModel.item == item)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_all(self, skip: int = 0, limit: int = 100) -> list[InventoryItem]:
        stmt = (
            select(InventoryItemModel)
            .order_by(InventoryItemModel.item)
            .offset(skip)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, item: InventoryItem) -> InventoryItem:
        model = InventoryItemModel(
            id=item.id,
            item=item.item,
            sale_price=item.sale_price,
            created_at=item.created_at,
            updated_at=item.updated_at,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, item: InventoryItem) -> InventoryItem:
        model = await self._session.get(InventoryItemModel, item.id)
        if model is None:
            raise ValueError(f"InventoryItem {item.id} not found in database")
        model.item = item.item
        model.sale_price = item.sale_price
        model.updated_at = item.updated_at
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, item_id: str) -> bool:
        model = await self._session.get(InventoryItemModel, item_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
