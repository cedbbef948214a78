"""Application service: Create Order use case.

Orchestrates the flow between repositories and the domain model.
This is the only place that coordinates multiple aggregates (Customer
and Product lookup + Order creation).
"""

from __future__ import annotations

import uuid

from storefront.application.dto import OrderDTO, OrderItemSpec
from storefront.application.mappers import order_to_dto
from storefront.application.order_items import build_order_items
from storefront.domain.model.order import Order
from storefront.domain.repository.customer_repository import CustomerRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        customer_repo: CustomerRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._customer_repo = customer_repo

    def handle(self, customer_id: str, item_specs: list[OrderItemSpec]) -> OrderDTO:
        """Create a new purchase order.

        Steps:
        1. Make sure the customer exists (fail if not found).
        2. Build OrderItems with *current* product names and prices.
        3. Let the Order aggregate validate all business rules.
        4. Persist and return a DTO.
        """
        customer = self._customer_repo.find(customer_id)
        items = build_order_items(self._product_repo, item_specs)

        order = Order(id=str(uuid.uuid4()), customer_id=customer.id, items=items)
        self._order_repo.create(order)

        return order_to_dto(order)
