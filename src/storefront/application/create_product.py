"""Application service: Create Product use case."""

from __future__ import annotations

import uuid
from decimal import Decimal

import structlog

from storefront.application.dto import ProductDTO
from storefront.application.mappers import product_to_dto
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class CreateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, name: str, price: str | int | Decimal) -> ProductDTO:
        """Add a new product to the catalog under a generated ID."""
        product = Product(id=str(uuid.uuid4()), name=name, price=Money.of(price))
        self._product_repo.create(product)
        logger.info("product_created", product_id=product.id)
        return product_to_dto(product)
