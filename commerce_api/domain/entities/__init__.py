from .client import ClientRecord, OrderDetail, OrderStatus
from .deletion_result import DeletionResult
from .inventory_item import InventoryItem
from .order import Order, OrderLine
from .user import Role, User

__all__ = [
    "ClientRecord",
    "OrderDetail",
    "OrderStatus",
    "DeletionResult",
    "InventoryItem",
    "Order",
    "OrderLine",
    "Role",
    "User",
]
