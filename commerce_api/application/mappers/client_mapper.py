"""Two-way conversion between client entities and their transfer shapes.

Both directions build fresh objects, so an entity and the DTO it was
mapped from never share a mutable ``pending_orders`` list.
"""

from commerce_api.application.schemas.client import ClientSchema, OrderDetailSchema
from commerce_api.domain.entities import ClientRecord, OrderDetail


def order_detail_to_entity(dto: OrderDetailSchema) -> OrderDetail:
    return OrderDetail(id=dto.id, status=dto.status, total=dto.total)


def order_detail_to_dto(order: OrderDetail) -> OrderDetailSchema:
    return OrderDetailSchema(id=order.id, status=order.status, total=order.total)


def to_entity(dto: ClientSchema) -> ClientRecord:
    """Map transfer shape → domain entity."""
    return ClientRecord(
        id=dto.id or "",
        first_name=dto.first_name,
        last_name=dto.last_name,
        email=dto.email,
        address=dto.address,
        pending_orders=[order_detail_to_entity(o) for o in dto.pending_orders],
    )


def to_dto(entity: ClientRecord) -> ClientSchema:
    """Map domain entity → transfer shape."""
    return ClientSchema(
        id=entity.id,
        first_name=entity.first_name,
        last_name=entity.last_name,
        email=entity.email,
        address=entity.address,
        pending_orders=[order_detail_to_dto(o) for o in entity.pending_orders],
    )
