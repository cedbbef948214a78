"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def create(self, order: Order) -> None:
        """Persist a new order together with all of its items."""

    @abstractmethod
    def update(self, order: Order) -> None:
        """Replace the stored item set and total of an existing order.

        Raises EntityNotFoundError if the order does not exist.
        """

    @abstractmethod
    def find(self, order_id: str) -> Order:
        """Return an order by its ID. Raises EntityNotFoundError if absent."""

    @abstractmethod
    def find_all(self) -> list[Order]:
        """Return every order, oldest first."""
