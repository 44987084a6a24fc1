"""Conversion between inventory entities and DTOs."""

from commerce_api.application.schemas.inventory import (
    InventoryItemCreate,
    InventoryItemResponse,
)
from commerce_api.domain.entities import InventoryItem


def to_entity(dto: InventoryItemCreate) -> InventoryItem:
    return InventoryItem(item=dto.item.strip(), sale_price=dto.sale_price)


def to_dto(entity: InventoryItem) -> InventoryItemResponse:
    return InventoryItemResponse(
        id=entity.id,
        item=entity.item,
        sale_price=entity.sale_price,
        created_at=entity.created_at,
        updated_at=entity.updated_at,
    )
