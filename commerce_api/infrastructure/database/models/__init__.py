from .client import ClientModel, PendingOrderModel
from .inventory import InventoryItemModel
from .order import OrderLineModel, OrderModel
from .user import UserModel

__all__ = [
    "ClientModel",
    "PendingOrderModel",
    "InventoryItemModel",
    "OrderLineModel",
    "OrderModel",
    "UserModel",
]
