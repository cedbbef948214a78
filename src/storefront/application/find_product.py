"""Application service: Find Product use case (query)."""

from __future__ import annotations

from storefront.application.dto import ProductDTO
from storefront.application.mappers import product_to_dto
from storefront.domain.repository.product_repository import ProductRepository


class FindProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> ProductDTO:
        return product_to_dto(self._product_repo.find(product_id))
