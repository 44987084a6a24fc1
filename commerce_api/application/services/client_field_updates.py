"""Field-update dispatch table for partial client updates.

``FIELD_UPDATE_RULES`` maps each updatable ``ClientField`` to a rule that
copies the matching value from a ``ClientUpdate`` onto a ``ClientRecord``.
A rule is a no-op when the request leaves its field absent or blank, and no
rule reads a field written by another, so the table can be applied in any
order. New fields are supported by adding an entry here.
"""

from collections.abc import Callable, Iterable, Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any

from commerce_api.application.mappers.client_mapper import order_detail_to_entity
from commerce_api.application.schemas.client import ClientUpdate
from commerce_api.application.services.order_reconciler import reconcile_pending_orders
from commerce_api.domain.entities import ClientRecord

UpdateRule = Callable[[ClientRecord, ClientUpdate], None]


class ClientField(str, Enum):
    ID = "id"
    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"
    EMAIL = "email"
    ADDRESS = "address"
    ORDER_DETAILS = "pending_orders"


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def _overwrite(attribute: str) -> UpdateRule:
    """Build a rule that replaces ``attribute`` when the request carries a value."""

    def rule(target: ClientRecord, request: ClientUpdate) -> None:
        value = getattr(request, attribute)
        if _is_blank(value):
            return
        setattr(target, attribute, value)

    rule.__name__ = f"overwrite_{attribute}"
    return rule


def _merge_order_details(target: ClientRecord, request: ClientUpdate) -> None:
    # Collection field: merged by order id rather than replaced.
    if not request.pending_orders:
        return
    reconcile_pending_orders(
        target, (order_detail_to_entity(o) for o in request.pending_orders)
    )


FIELD_UPDATE_RULES: Mapping[ClientField, UpdateRule] = MappingProxyType({
    ClientField.ID: _overwrite("id"),
    ClientField.FIRST_NAME: _overwrite("first_name"),
    ClientField.LAST_NAME: _overwrite("last_name"),
    ClientField.EMAIL: _overwrite("email"),
    ClientField.ADDRESS: _overwrite("address"),
    ClientField.ORDER_DETAILS: _merge_order_details,
})


def apply_field_updates(
    target: ClientRecord,
    request: ClientUpdate,
    fields: Iterable[ClientField] | None = None,
) -> ClientRecord:
    """Apply the rules for ``fields`` (all of them by default) to ``target``."""
    for client_field in fields if fields is not None else FIELD_UPDATE_RULES:
        FIELD_UPDATE_RULES[client_field](target, request)
    return target
