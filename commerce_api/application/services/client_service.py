"""Application service (use case) for client operations."""

import logging

from commerce_api.application.interfaces import ClientRepository
from commerce_api.application.mappers import client_mapper
from commerce_api.application.schemas.client import (
    ClientSchema,
    ClientUpdate,
    OrderDetailSchema,
)
from commerce_api.application.services.client_field_updates import (
    ClientField,
    apply_field_updates,
)
from commerce_api.application.services.order_reconciler import (
    patch_order_status,
    remove_pending_order,
)
from commerce_api.domain.entities import ClientRecord, DeletionResult, OrderStatus
from commerce_api.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidArgumentError,
)

logger = logging.getLogger(__name__)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class ClientService:
    """Orchestrates client lookups and updates. Depends on the repository port (DI).

    Each call is a plain load/mutate/save sequence with no locking; two
    concurrent writers to the same client can overwrite each other.
    """

    def __init__(self, repository: ClientRepository):
        self._repository = repository

    async def _load(self, client_id: str) -> ClientRecord:
        record = await self._repository.get_by_id(client_id)
        if record is None:
            raise EntityNotFoundError("Client", client_id)
        return record

    # ── Queries ──────────────────────────────────────────────────────

    async def get_by_id(self, client_id: str) -> ClientSchema:
        return client_mapper.to_dto(await self._load(client_id))

    async def get_by_keyword(self, keyword: str) -> list[ClientSchema]:
        if _is_blank(keyword):
            raise InvalidArgumentError("Search keyword cannot be empty")
        records = await self._repository.search(keyword.strip())
        return [client_mapper.to_dto(r) for r in records]

    async def get_by_order_id(self, order_id: str) -> ClientSchema:
        if _is_blank(order_id):
            raise InvalidArgumentError("Order id cannot be empty")
        record = await self._repository.get_by_order_id(order_id)
        if record is None:
            raise EntityNotFoundError("Client", order_id, field="order id")
        return client_mapper.to_dto(record)

    # ── Commands ─────────────────────────────────────────────────────

    async def create(self, data: ClientSchema) -> ClientSchema:
        if _is_blank(data.id) or _is_blank(data.email) or _is_blank(data.first_name):
            raise InvalidArgumentError("Client id, email and first name cannot be empty")

        order_ids = [o.id for o in data.pending_orders]
        if len(order_ids) != len(set(order_ids)):
            raise InvalidArgumentError("Pending order ids must be unique per client")

        if await self._repository.exists(data.id):
            raise DuplicateEntityError("Client", "id", data.id)

        saved = await self._repository.save(client_mapper.to_entity(data))
        logger.info("Created client %s", saved.id)
        return client_mapper.to_dto(saved)

    async def update_by_id(self, data: ClientUpdate | None, client_id: str) -> ClientSchema:
        """Apply every field rule to the stored client and save the result.

        The loaded entity, not the raw request, is what gets persisted.
        """
        if data is None:
            raise InvalidArgumentError("Client update request cannot be empty")
        if not _is_blank(data.id) and data.id != client_id:
            raise InvalidArgumentError(
                f"Client id '{data.id}' does not match path id '{client_id}'"
            )

        record = await self._load(client_id)
        apply_field_updates(record, data)
        saved = await self._repository.save(record)
        logger.info("Updated client %s", client_id)
        return client_mapper.to_dto(saved)

    async def update_order_by_client_id(
        self, order: OrderDetailSchema | None, client_id: str
    ) -> ClientSchema:
        """Merge a single order into the client's pending list."""
        if order is None:
            raise InvalidArgumentError("Order details cannot be empty")

        record = await self._load(client_id)
        apply_field_updates(
            record,
            ClientUpdate(pending_orders=[order]),
            fields=[ClientField.ORDER_DETAILS],
        )
        saved = await self._repository.save(record)
        logger.info("Merged order %s into client %s", order.id, client_id)
        return client_mapper.to_dto(saved)

    async def update_order_status_by_client_id(
        self, order_id: str, new_status: OrderStatus, client_id: str
    ) -> ClientSchema:
        record = await self._load(client_id)
        if not patch_order_status(record, order_id, new_status):
            raise EntityNotFoundError("Order", order_id)
        saved = await self._repository.save(record)
        logger.info(
            "Order %s of client %s is now %s", order_id, client_id, new_status.value
        )
        return client_mapper.to_dto(saved)

    async def delete_by_id(self, client_id: str) -> DeletionResult:
        record = await self._repository.get_by_id(client_id)
        if record is None:
            logger.debug("Delete skipped, client %s not found", client_id)
            return DeletionResult(False, f"Client with id: {client_id} not found")
        await self._repository.delete(record)
        logger.info("Deleted client %s", client_id)
        return DeletionResult(True, f"Client with id: {client_id} was successfully deleted")

    async def delete_order_by_id(self, client_id: str, order_id: str) -> DeletionResult:
        record = await self._repository.get_by_id(client_id)
        if record is None:
            return DeletionResult(False, f"Client with id: {client_id} not found")

        if not remove_pending_order(record, order_id):
            return DeletionResult(
                False, f"Order with id: {order_id} not found for client {client_id}"
            )

        await self._repository.save(record)
        logger.info("Removed order %s from client %s", order_id, client_id)
        return DeletionResult(
            True, f"Order with id: {order_id} was successfully removed from client {client_id}"
        )
