"""Concrete repository implementation for clients backed by SQLAlchemy."""

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from commerce_api.application.interfaces import ClientRepository
from commerce_api.domain.entities import ClientRecord, OrderDetail, OrderStatus
from commerce_api.infrastructure.database.models import ClientModel, PendingOrderModel


class SQLAlchemyClientRepository(ClientRepository):
    """Implements the ClientRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ClientModel) -> ClientRecord:
        """Map ORM model → domain entity."""
        return ClientRecord(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
            address=model.address,
            pending_orders=[
                OrderDetail(
                    id=row.order_id,
                    status=OrderStatus(row.status),
                    total=row.total,
                )
                for row in model.pending_orders
            ],
        )

    def _sync_pending_orders(self, model: ClientModel, orders: list[OrderDetail]) -> None:
        """Make the child rows mirror ``orders``, reusing rows by order id.

        Reusing rows keeps the (client_id, order_id) constraint satisfied
        while rows are reordered, patched, added and orphaned in one flush.
        """
        existing = {row.order_id: row for row in model.pending_orders}
        rows: list[PendingOrderModel] = []
        for position, order in enumerate(orders):
            row = existing.pop(order.id, None)
            if row is None:
                row = PendingOrderModel(order_id=order.id)
            row.status = order.status.value
            row.total = order.total
            row.position = position
            rows.append(row)
        model.pending_orders = rows

    async def get_by_id(self, client_id: str) -> ClientRecord | None:
        result = await self._session.get(ClientModel, client_id)
        return self._to_entity(result) if result else None

    async def get_by_order_id(self, order_id: str) -> ClientRecord | None:
        stmt = (
            select(ClientModel)
            .join(ClientModel.pending_orders)
            .where(PendingOrderModel.order_id == order_id)
            .limit(1)
        )
        result = await self._session.execute(stmt)
        model = result.scalars().first()
        return self._to_entity(model) if model else None

    async def search(self, keyword: str) -> list[ClientRecord]:
        stmt = (
            select(ClientModel)
            .where(
                or_(
                    ClientModel.first_name.icontains(keyword, autoescape=True),
                    ClientModel.last_name.icontains(keyword, autoescape=True),
                    ClientModel.email.icontains(keyword, autoescape=True),
                    ClientModel.address.icontains(keyword, autoescape=True),
                )
            )
            .order_by(ClientModel.id)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def save(self, record: ClientRecord) -> ClientRecord:
        model = await self._session.get(ClientModel, record.id)
        if model is None:
            model = ClientModel(id=record.id)
            self._session.add(model)
        model.first_name = record.first_name
        model.last_name = record.last_name
        model.email = record.email
        model.address = record.address
        self._sync_pending_orders(model, record.pending_orders)
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, record: ClientRecord) -> None:
        model = await self._session.get(ClientModel, record.id)
        if model is None:
            return
        await self._session.delete(model)
        await self._session.flush()

    async def exists(self, client_id: str) -> bool:
        stmt = select(ClientModel.id).where(ClientModel.id == client_id).limit(1)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None
