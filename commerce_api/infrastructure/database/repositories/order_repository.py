"""Concrete repository implementation for orders backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from commerce_api.application.interfaces import OrderRepository
from commerce_api.domain.entities import Order, OrderLine, OrderStatus
from commerce_api.infrastructure.database.models import OrderLineModel, OrderModel


class SQLAlchemyOrderRepository(OrderRepository):
    """Implements the OrderRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: OrderModel) -> Order:
        return Order(
            id=model.id,
            client_id=model.client_id,
            status=OrderStatus(model.status),
            created_at=model.created_at,
            lines=[
                OrderLine(item=line.item, quantity=line.quantity, unit_price=line.unit_price)
                for line in model.lines
            ],
        )

    async def get_by_id(self, order_id: str) -> Order | None:
        result = await self._session.get(OrderModel, order_id)
        return self._to_entity(result) if result else None

    async def get_by_client_id(self, client_id: str) -> list[Order]:
        stmt = (
            select(OrderModel)
            .where(OrderModel.client_id == client_id)
            .order_by(OrderModel.created_at)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, order: Order) -> Order:
        model = OrderModel(
            id=order.id,
            client_id=order.client_id,
            status=order.status.value,
            total=order.total,
            created_at=order.created_at,
            lines=[
                OrderLineModel(
                    position=position,
                    item=line.item,
                    quantity=line.quantity,
                    unit_price=line.unit_price,
                )
                for position, line in enumerate(order.lines)
            ],
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)
