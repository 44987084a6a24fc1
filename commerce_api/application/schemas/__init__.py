from .client import (
    ClientSchema,
    ClientUpdate,
    MessageResponse,
    OrderDetailSchema,
    OrderStatusUpdate,
)
from .inventory import InventoryItemCreate, InventoryItemUpdate, InventoryItemResponse
from .order import OrderCreate, OrderLineSchema, OrderResponse
from .user import UserCreate, UserResponse

__all__ = [
    "ClientSchema",
    "ClientUpdate",
    "MessageResponse",
    "OrderDetailSchema",
    "OrderStatusUpdate",
    "InventoryItemCreate",
    "InventoryItemUpdate",
    "InventoryItemResponse",
    "OrderCreate",
    "OrderLineSchema",
    "OrderResponse",
    "UserCreate",
    "UserResponse",
]
