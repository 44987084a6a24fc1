"""Pydantic DTOs for orders."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from commerce_api.domain.entities import OrderStatus


class OrderLineSchema(BaseModel):
    item: str = Field(..., min_length=1, max_length=200)
    quantity: int = Field(..., gt=0)
    unit_price: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)

    model_config = {"from_attributes": True}


class OrderCreate(BaseModel):
    """Schema for placing an order. The total is computed, never supplied."""

    client_id: str = Field(..., max_length=64)
    lines: list[OrderLineSchema] = Field(default_factory=list)


class OrderResponse(BaseModel):
    id: str
    client_id: str
    lines: list[OrderLineSchema]
    status: OrderStatus
    total: Decimal
    created_at: datetime

    model_config = {"from_attributes": True}
