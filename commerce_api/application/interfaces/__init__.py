from .client_repository import ClientRepository
from .inventory_repository import InventoryRepository
from .order_repository import OrderRepository
from .user_repository import UserRepository

__all__ = [
    "ClientRepository",
    "InventoryRepository",
    "OrderRepository",
    "UserRepository",
]
