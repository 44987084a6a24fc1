"""Application service (use case) for placing and reading orders."""

import logging

from commerce_api.application.interfaces import OrderRepository
from commerce_api.application.schemas.order import OrderCreate
from commerce_api.domain.entities import Order, OrderLine
from commerce_api.domain.exceptions import EntityNotFoundError, InvalidArgumentError

logger = logging.getLogger(__name__)


class OrderService:
    """Places and reads orders. Depends on the repository port (DI)."""

    def __init__(self, repository: OrderRepository):
        self._repository = repository

    async def get_order_by_id(self, order_id: str) -> Order:
        order = await self._repository.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError("Order", order_id)
        return order

    async def list_orders_by_client(self, client_id: str) -> list[Order]:
        if not client_id.strip():
            raise InvalidArgumentError("Client id cannot be empty")
        return await self._repository.get_by_client_id(client_id)

    async def create_order(self, data: OrderCreate) -> Order:
        if not data.client_id.strip():
            raise InvalidArgumentError("Client id cannot be empty")
        if not data.lines:
            raise InvalidArgumentError("An order needs at least one line")

        order = Order(
            client_id=data.client_id,
            lines=[
                OrderLine(item=line.item, quantity=line.quantity, unit_price=line.unit_price)
                for line in data.lines
            ],
        )
        created = await self._repository.create(order)
        logger.info(
            "Created order %s for client %s (total=%s)",
            created.id, created.client_id, created.total,
        )
        return created
