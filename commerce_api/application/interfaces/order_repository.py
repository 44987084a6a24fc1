"""Abstract repository interface (port) for order persistence."""

from abc import ABC, abstractmethod

from commerce_api.domain.entities import Order


class OrderRepository(ABC):

    @abstractmethod
    async def get_by_id(self, order_id: str) -> Order | None:
        ...

    @abstractmethod
    async def get_by_client_id(self, client_id: str) -> list[Order]:
        """All orders placed by a client, oldest first."""
        ...

    @abstractmethod
    async def create(self, order: Order) -> Order:
        ...
