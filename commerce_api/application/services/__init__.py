from .client_service import ClientService
from .inventory_service import InventoryService
from .order_service import OrderService
from .user_service import UserService

__all__ = [
    "ClientService",
    "InventoryService",
    "OrderService",
    "UserService",
]
