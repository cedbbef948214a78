"""Application service: Find Customer use case (query)."""

from __future__ import annotations

from storefront.application.dto import CustomerDTO
from storefront.application.mappers import customer_to_dto
from storefront.domain.repository.customer_repository import CustomerRepository


class FindCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, customer_id: str) -> CustomerDTO:
        return customer_to_dto(self._customer_repo.find(customer_id))
