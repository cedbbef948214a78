"""Application service: Update Order use case.

Replaces the complete item set of an order. Items omitted from the
request are removed; items whose spec carries an existing ``item_id``
keep that id but get the product's current name and price.
"""

from __future__ import annotations

from storefront.application.dto import OrderDTO, OrderItemSpec
from storefront.application.mappers import order_to_dto
from storefront.application.order_items import build_order_items
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository


class UpdateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(self, order_id: str, item_specs: list[OrderItemSpec]) -> OrderDTO:
        order = self._order_repo.find(order_id)
        order.replace_items(build_order_items(self._product_repo, item_specs))
        self._order_repo.update(order)
        return order_to_dto(order)
