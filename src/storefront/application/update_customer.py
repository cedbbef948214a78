"""Application service: Update Customer use case."""

from __future__ import annotations

from storefront.application.dto import AddressSpec, CustomerDTO
from storefront.application.mappers import address_from_spec, customer_to_dto
from storefront.domain.repository.customer_repository import CustomerRepository


class UpdateCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(
        self,
        customer_id: str,
        name: str,
        address: AddressSpec | None = None,
    ) -> CustomerDTO:
        """Rename a customer and, if given, move them to a new address.

        Omitting *address* keeps the current one. Supplying an address to
        an inactive customer activates them.
        """
        customer = self._customer_repo.find(customer_id)
        new_address = address_from_spec(address)
        customer.change_name(name)
        if new_address is not None:
            customer.change_address(new_address)
            if not customer.active:
                customer.activate()
        self._customer_repo.update(customer)
        return customer_to_dto(customer)
