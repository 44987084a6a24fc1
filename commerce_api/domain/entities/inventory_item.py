"""Domain entity for a sellable inventory item."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from uuid import uuid4


@dataclass
class InventoryItem:
    item: str
    sale_price: Decimal
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(
        self,
        item: str | None = None,
        sale_price: Decimal | None = None,
    ) -> None:
        """Update mutable fields and refresh the updated_at timestamp."""
        if item is not None:
            self.item = item
        if sale_price is not None:
            self.sale_price = sale_price
        self.updated_at = datetime.now(timezone.utc)
