"""SQLAlchemy ORM models for clients and their embedded pending orders."""

from decimal import Decimal

from sqlalchemy import ForeignKey, Index, Integer, Numeric, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from commerce_api.infrastructure.database.base import Base


class ClientModel(Base):
    """ORM model — maps to the 'clients' table."""

    __tablename__ = "clients"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    first_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    address: Mapped[str | None] = mapped_column(String(500), nullable=True)

    # Owned exclusively by the client row, like an embedded document list
    pending_orders: Mapped[list["PendingOrderModel"]] = relationship(
        back_populates="client",
        cascade="all, delete-orphan",
        order_by="PendingOrderModel.position",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<ClientModel(id={self.id}, email='{self.email}')>"


class PendingOrderModel(Base):
    """One entry of a client's pending-orders list."""

    __tablename__ = "client_pending_orders"

    pk: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    client_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("clients.id", ondelete="CASCADE"), nullable=False
    )
    order_id: Mapped[str] = mapped_column(String(64), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    total: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    client: Mapped[ClientModel] = relationship(back_populates="pending_orders")

    __table_args__ = (
        UniqueConstraint("client_id", "order_id", name="uq_client_pending_order"),
        Index("ix_client_pending_orders_order_id", "order_id"),
    )
