"""Application service (use case) for inventory operations."""

import logging

from commerce_api.application.interfaces import InventoryRepository
from commerce_api.application.mappers import inventory_mapper
from commerce_api.application.schemas.inventory import InventoryItemCreate, InventoryItemUpdate
from commerce_api.domain.entities import DeletionResult, InventoryItem
from commerce_api.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidArgumentError,
)

logger = logging.getLogger(__name__)


class InventoryService:
    """Orchestrates inventory CRUD logic. Depends on the repository port (DI)."""

    def __init__(self, repository: InventoryRepository):
        self._repository = repository

    async def get_item(self, item_id: str) -> InventoryItem:
        item = await self._repository.get_by_id(item_id)
        if item is None:
            raise EntityNotFoundError("InventoryItem", item_id)
        return item

    async def list_items(self, skip: int = 0, limit: int = 100) -> list[InventoryItem]:
        return await self._repository.get_all(skip=skip, limit=limit)

    async def create_item(self, data: InventoryItemCreate) -> InventoryItem:
        if not data.item.strip():
            raise InvalidArgumentError("Item name cannot be empty")
        item = inventory_mapper.to_entity(data)
        if await self._repository.get_by_name(item.item) is not None:
            raise DuplicateEntityError("InventoryItem", "item", item.item)
        created = await self._repository.create(item)
        logger.info("Created inventory item %s (%s)", created.id, created.item)
        return created

    async def update_item(self, item_id: str, data: InventoryItemUpdate) -> InventoryItem:
        item = await self.get_item(item_id)

        name = data.item.strip() if data.item is not None else None
        if name is not None and not name:
            raise InvalidArgumentError("Item name cannot be empty")
        if name is not None and name != item.item:
            clash = await self._repository.get_by_name(name)
            if clash is not None:
                raise DuplicateEntityError("InventoryItem", "item", name)

        item.update(item=name, sale_price=data.sale_price)
        return await self._repository.update(item)

    async def delete_item(self, item_id: str) -> DeletionResult:
        if not await self._repository.delete(item_id):
            return DeletionResult(False, f"Inventory item with id: {item_id} not found")
        logger.info("Deleted inventory item %s", item_id)
        return DeletionResult(True, f"Inventory item with id: {item_id} was successfully deleted")
