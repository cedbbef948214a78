"""Turns OrderItemSpecs into OrderItems with a product price snapshot."""

from __future__ import annotations

import uuid

from storefront.application.dto import OrderItemSpec
from storefront.domain.model.order import OrderItem
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.product_repository import ProductRepository


def build_order_items(
    product_repo: ProductRepository,
    item_specs: list[OrderItemSpec],
) -> list[OrderItem]:
    """Resolve every spec against the catalog.

    Raises EntityNotFoundError for an unknown product and ValidationError
    for a non-positive quantity. Name and price are copied from the
    product as it is *now*.
    """
    items: list[OrderItem] = []
    for spec in item_specs:
        product = product_repo.find(spec.product_id)
        items.append(
            OrderItem(
                id=spec.item_id or str(uuid.uuid4()),
                name=product.name,
                price=product.price,  # <-- price snapshot
                product_id=product.id,
                quantity=Quantity(spec.quantity),
            )
        )
    return items
