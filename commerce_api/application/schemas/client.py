"""Pydantic DTOs (Data Transfer Objects) for the client feature."""

from decimal import Decimal

from pydantic import BaseModel, Field

from commerce_api.domain.entities import OrderStatus


class OrderDetailSchema(BaseModel):
    """A pending order as exchanged with callers."""

    id: str = Field(..., min_length=1, max_length=64, examples=["o-1001"])
    status: OrderStatus = OrderStatus.PENDING
    total: Decimal = Field(
        Decimal("0"), ge=0, max_digits=12, decimal_places=2, examples=["49.90"],
    )

    model_config = {"from_attributes": True}


class ClientSchema(BaseModel):
    """Transfer shape of a client, used for creation and responses.

    Required-field checks (id, email, first name) happen in the service so
    that a missing value surfaces as an invalid-argument error rather than a
    validation failure specific to the HTTP layer.
    """

    id: str | None = Field(None, max_length=64, examples=["c-42"])
    first_name: str | None = Field(None, max_length=100, examples=["Ada"])
    last_name: str | None = Field(None, max_length=100, examples=["Lovelace"])
    email: str | None = Field(None, max_length=255, examples=["ada@example.com"])
    address: str | None = Field(None, max_length=500)
    pending_orders: list[OrderDetailSchema] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class ClientUpdate(BaseModel):
    """Partial update — an absent (None) field leaves the stored value alone."""

    id: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    address: str | None = None
    pending_orders: list[OrderDetailSchema] | None = None


class OrderStatusUpdate(BaseModel):
    status: OrderStatus


class MessageResponse(BaseModel):
    """Plain confirmation message returned by delete endpoints."""

    message: str
