"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
names and prices change, products are added to the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    Mutations go through ``change_name`` / ``change_price`` which validate
    *before* assigning, so a rejected change leaves the product untouched.
    """

    id: str
    name: str
    price: Money

    def __post_init__(self) -> None:
        if not self.id:
            raise ValidationError("Id is required")
        self._validate_name(self.name)
        self._validate_price(self.price)

    def change_name(self, name: str) -> None:
        self._validate_name(name)
        self.name = name

    def change_price(self, price: Money) -> None:
        """Change the product price.

        Existing orders are not affected; they hold their own price snapshot.
        """
        self._validate_price(price)
        self.price = price

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _validate_name(name: str) -> None:
        if not name or not name.strip():
            raise ValidationError("Name is required")

    @staticmethod
    def _validate_price(price: Money) -> None:
        if not isinstance(price, Money):
            raise ValidationError("Price must be a monetary amount")
