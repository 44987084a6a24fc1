"""Abstract repository interface (port) for client persistence."""

from abc import ABC, abstractmethod

from commerce_api.domain.entities import ClientRecord


class ClientRepository(ABC):
    """Port for client persistence — implemented in the infrastructure layer.

    Lookups return ``None`` on a miss; raising is left to the service.
    """

    @abstractmethod
    async def get_by_id(self, client_id: str) -> ClientRecord | None:
        """Retrieve a client by its identifier."""
        ...

    @abstractmethod
    async def get_by_order_id(self, order_id: str) -> ClientRecord | None:
        """Retrieve the client owning the embedded pending order ``order_id``."""
        ...

    @abstractmethod
    async def search(self, keyword: str) -> list[ClientRecord]:
        """Case-insensitive substring match on name, email and address."""
        ...

    @abstractmethod
    async def save(self, record: ClientRecord) -> ClientRecord:
        """Insert or fully replace the client stored under ``record.id``."""
        ...

    @abstractmethod
    async def delete(self, record: ClientRecord) -> None:
        """Remove the client and its pending orders."""
        ...

    @abstractmethod
    async def exists(self, client_id: str) -> bool:
        ...
