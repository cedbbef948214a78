"""Application service: Update Product use case."""

from __future__ import annotations

from decimal import Decimal

import structlog

from storefront.application.dto import ProductDTO
from storefront.application.mappers import product_to_dto
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, name: str, price: str | int | Decimal) -> ProductDTO:
        """Rename and reprice a product.

        Both changes are validated by the aggregate before the repository
        is touched, so an invalid request writes nothing. Existing orders
        keep the price they captured.
        """
        product = self._product_repo.find(product_id)
        new_price = Money.of(price)
        product.change_name(name)
        product.change_price(new_price)
        self._product_repo.update(product)
        logger.info("product_updated", product_id=product.id)
        return product_to_dto(product)
