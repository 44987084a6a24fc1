"""Abstract repository interface (port) for inventory persistence."""

from abc import ABC, abstractmethod

from commerce_api.domain.entities import InventoryItem


class InventoryRepository(ABC):

    @abstractmethod
    async def get_by_id(self, item_id: str) -> InventoryItem | None:
        ...

    @abstractmethod
    async def get_by_name(self, item: str) -> InventoryItem | None:
        """Retrieve an item by its (unique) name."""
        ...

    @abstractmethod
    async def get_all(self, skip: int = 0, limit: int = 100) -> list[InventoryItem]:
        ...

    @abstractmethod
    async def create(self, item: InventoryItem) -> InventoryItem:
        ...

    @abstractmethod
    async def update(self, item: InventoryItem) -> InventoryItem:
        ...

    @abstractmethod
    async def delete(self, item_id: str) -> bool:
        """Delete an item. Returns True if deleted, False if not found."""
        ...
