"""Domain entities for clients and their embedded pending orders."""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


class OrderStatus(str, Enum):
    """Lifecycle status of an order."""

    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


@dataclass
class OrderDetail:
    """A pending order embedded in a client record.

    Has no existence outside its owning client; ``id`` is unique within
    the client's ``pending_orders`` list.
    """

    id: str
    status: OrderStatus = OrderStatus.PENDING
    total: Decimal = Decimal("0")


@dataclass
class ClientRecord:
    """Core domain entity for a client and the orders awaiting fulfilment."""

    id: str
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    address: str | None = None
    pending_orders: list[OrderDetail] = field(default_factory=list)

    def find_order(self, order_id: str) -> OrderDetail | None:
        for order in self.pending_orders:
            if order.id == order_id:
                return order
        return None
