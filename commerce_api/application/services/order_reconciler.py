"""List reconciliation for a client's embedded pending orders.

Every function mutates the client in place and keeps order ids unique
within ``pending_orders``.
"""

from collections.abc import Iterable
from dataclasses import replace

from commerce_api.domain.entities import ClientRecord, OrderDetail, OrderStatus


def merge_pending_order(target: ClientRecord, incoming: OrderDetail) -> None:
    """Patch the order with the same id, or append ``incoming`` if there is none.

    A match only has its status and total overwritten, so the list length
    never changes on that path. An unknown id grows the list by exactly one.
    """
    if not target.pending_orders:
        target.pending_orders = [replace(incoming)]
        return

    existing = target.find_order(incoming.id)
    if existing is not None:
        existing.status = incoming.status
        existing.total = incoming.total
        return

    target.pending_orders.append(replace(incoming))


def reconcile_pending_orders(
    target: ClientRecord, incoming: Iterable[OrderDetail]
) -> None:
    """Merge each incoming order into the client's list, in order."""
    for order in incoming:
        merge_pending_order(target, order)


def patch_order_status(
    target: ClientRecord, order_id: str, status: OrderStatus
) -> bool:
    """Set the status of the first order matching ``order_id``.

    Returns False when the client has no such order.
    """
    for order in target.pending_orders:
        if order.id == order_id:
            order.status = status
            return True
    return False


def remove_pending_order(target: ClientRecord, order_id: str) -> bool:
    """Drop every order with ``order_id``. Returns True if anything was removed."""
    remaining = [o for o in target.pending_orders if o.id != order_id]
    removed = len(remaining) != len(target.pending_orders)
    target.pending_orders = remaining
    return removed
