"""Customer aggregate.

Orders reference customers by id only; a customer never owns orders.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Address


@dataclass
class Customer:
    """A registered customer.

    Invariants:
    - ``name`` is never empty
    - an ``active`` customer always has an address
    - ``reward_points`` never decreases
    """

    id: str
    name: str
    address: Address | None = None
    active: bool = False
    reward_points: int = 0

    def __post_init__(self) -> None:
        if not self.id:
            raise ValidationError("Id is required")
        self._validate_name(self.name)
        if self.active and self.address is None:
            raise ValidationError("Address is mandatory to activate a customer")
        if self.reward_points < 0:
            raise ValidationError("Reward points cannot be negative")

    def change_name(self, name: str) -> None:
        self._validate_name(name)
        self.name = name

    def change_address(self, address: Address) -> None:
        self.address = address

    def activate(self) -> None:
        if self.address is None:
            raise ValidationError("Address is mandatory to activate a customer")
        self.active = True

    def deactivate(self) -> None:
        self.active = False

    def add_reward_points(self, points: int) -> None:
        if points <= 0:
            raise ValidationError("Reward points must be positive")
        self.reward_points += points

    @staticmethod
    def _validate_name(name: str) -> None:
        if not name or not name.strip():
            raise ValidationError("Name is required")
