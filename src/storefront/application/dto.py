"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: which product to order and how many.

    ``item_id`` lets a caller keep an item's identity across updates;
    a fresh id is generated when it is omitted.
    """

    product_id: str
    quantity: int
    item_id: str | None = None


@dataclass(frozen=True)
class AddressSpec:
    """Input: postal address of a customer."""

    street: str
    number: int
    zip_code: str
    city: str


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    price: Decimal


@dataclass(frozen=True)
class OrderItemDTO:
    """Output: a single line item as displayed to the user."""

    id: str
    name: str
    price: Decimal
    product_id: str
    quantity: int
    line_total: Decimal


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: str
    customer_id: str
    items: list[OrderItemDTO]
    total: Decimal
    created_at: str


@dataclass(frozen=True)
class AddressDTO:
    street: str
    number: int
    zip_code: str
    city: str


@dataclass(frozen=True)
class CustomerDTO:
    id: str
    name: str
    address: AddressDTO | None
    active: bool
    reward_points: int
