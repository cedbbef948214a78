"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its line items.
All business invariants are enforced here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money, Quantity


@dataclass
class OrderItem:
    """Captures the price snapshot of a product at order time.

    Items have no lifecycle of their own: they are created, replaced and
    deleted only through their parent Order.
    """

    id: str
    name: str
    price: Money  # locked when the item is built
    product_id: str
    quantity: Quantity

    def __post_init__(self) -> None:
        if not self.id:
            raise ValidationError("Item id is required")
        if not self.name or not self.name.strip():
            raise ValidationError("Item name is required")
        if not self.product_id:
            raise ValidationError("Product id is required")
        if not isinstance(self.price, Money):
            raise ValidationError("Item price must be a monetary amount")

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for purchase orders.

    ``total`` is always derived from ``items``; the persisted ``total``
    column is only a copy that the repository keeps in sync.
    """

    id: str
    customer_id: str
    items: list[OrderItem]
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        if not self.id:
            raise ValidationError("Id is required")
        if not self.customer_id:
            raise ValidationError("Customer id is required")
        self._validate_items(self.items)
        self.items = list(self.items)

    # --- Mutations ------------------------------------------------------------

    def replace_items(self, items: list[OrderItem]) -> None:
        """Swap the whole item set. Nothing changes if *items* is invalid."""
        self._validate_items(items)
        self.items = list(items)

    def add_item(self, item: OrderItem) -> None:
        self.replace_items([*self.items, item])

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _validate_items(items: list[OrderItem]) -> None:
        if not items:
            raise ValidationError("Order must contain at least one item")
        seen: set[str] = set()
        for item in items:
            if item.id in seen:
                raise ValidationError(f"Duplicate item id '{item.id}' in order")
            seen.add(item.id)
