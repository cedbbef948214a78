"""Abstract repository for Customer aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.customer import Customer


class CustomerRepository(ABC):

    @abstractmethod
    def create(self, customer: Customer) -> None:
        """Persist a new customer."""

    @abstractmethod
    def update(self, customer: Customer) -> None:
        """Persist changes to an existing customer."""

    @abstractmethod
    def find(self, customer_id: str) -> Customer:
        """Return a customer by ID. Raises EntityNotFoundError if absent."""

    @abstractmethod
    def find_all(self) -> list[Customer]:
        """Return every customer, oldest first."""
