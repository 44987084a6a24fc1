from .client_repository import SQLAlchemyClientRepository
from .inventory_repository import SQLAlchemyInventoryRepository
from .order_repository import SQLAlchemyOrderRepository
from .user_repository import SQLAlchemyUserRepository

__all__ = [
    "SQLAlchemyClientRepository",
    "SQLAlchemyInventoryRepository",
    "SQLAlchemyOrderRepository",
    "SQLAlchemyUserRepository",
]
