"""Application service: Create Customer use case."""

from __future__ import annotations

import uuid

from storefront.application.dto import AddressSpec, CustomerDTO
from storefront.application.mappers import address_from_spec, customer_to_dto
from storefront.domain.model.customer import Customer
from storefront.domain.repository.customer_repository import CustomerRepository


class CreateCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, name: str, address: AddressSpec | None = None) -> CustomerDTO:
        """Register a customer.

        A customer given an address starts active; one without stays
        inactive until an address is supplied.
        """
        customer = Customer(
            id=str(uuid.uuid4()),
            name=name,
            address=address_from_spec(address),
        )
        if customer.address is not None:
            customer.activate()
        self._customer_repo.create(customer)
        return customer_to_dto(customer)
