"""Pydantic DTOs for inventory items."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field


class InventoryItemCreate(BaseModel):
    item: str = Field(..., max_length=200, examples=["USB-C cable"])
    sale_price: Decimal = Field(
        ..., ge=0, max_digits=12, decimal_places=2, examples=["9.99"],
    )


class InventoryItemUpdate(BaseModel):
    """Schema for updating an inventory item — all fields optional."""

    item: str | None = Field(None, max_length=200)
    sale_price: Decimal | None = Field(None, ge=0, max_digits=12, decimal_places=2)


class InventoryItemResponse(BaseModel):
    id: str
    item: str
    sale_price: Decimal
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
