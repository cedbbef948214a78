"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (SQL, in-memory)
live in the infrastructure layer and the test suite.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def create(self, product: Product) -> None:
        """Persist a new product."""

    @abstractmethod
    def update(self, product: Product) -> None:
        """Overwrite name and price. Raises EntityNotFoundError if absent."""

    @abstractmethod
    def find(self, product_id: str) -> Product:
        """Return a product by its ID. Raises EntityNotFoundError if absent."""

    @abstractmethod
    def find_all(self) -> list[Product]:
        """Return every product in the catalog, oldest first."""
