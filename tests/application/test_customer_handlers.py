"""Unit tests for the Customer use cases."""

import pytest

from storefront.application.create_customer import CreateCustomerHandler
from storefront.application.dto import AddressDTO, AddressSpec
from storefront.application.find_customer import FindCustomerHandler
from storefront.application.list_customers import ListCustomersHandler
from storefront.application.update_customer import UpdateCustomerHandler
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from tests.fakes import FakeCustomerRepository

ADDRESS = AddressSpec(street="Main St", number=12, zip_code="12345", city="Springfield")


class TestCreateCustomer:

    def test_customer_without_address_is_inactive(self):
        dto = CreateCustomerHandler(FakeCustomerRepository()).handle(name="Alice")
        assert dto.id
        assert dto.address is None
        assert dto.active is False

    def test_customer_with_address_is_active(self):
        dto = CreateCustomerHandler(FakeCustomerRepository()).handle("Alice", ADDRESS)
        assert dto.active is True
        assert dto.address == AddressDTO("Main St", 12, "12345", "Springfield")

    def test_empty_name_rejected(self):
        repo = FakeCustomerRepository()
        with pytest.raises(ValidationError, match="Name is required"):
            CreateCustomerHandler(repo).handle(name="")
        assert repo.writes == 0


class TestFindAndListCustomers:

    def test_find(self):
        repo = FakeCustomerRepository()
        created = CreateCustomerHandler(repo).handle("Alice", ADDRESS)
        assert FindCustomerHandler(repo).handle(created.id) == created

    def test_find_missing(self):
        with pytest.raises(EntityNotFoundError):
            FindCustomerHandler(FakeCustomerRepository()).handle("missing")

    def test_list(self):
        repo = FakeCustomerRepository()
        CreateCustomerHandler(repo).handle("Alice")
        CreateCustomerHandler(repo).handle("Bob")
        assert [c.name for c in ListCustomersHandler(repo).handle()] == ["Alice", "Bob"]


class TestUpdateCustomer:

    def test_rename_keeps_address(self):
        repo = FakeCustomerRepository()
        created = CreateCustomerHandler(repo).handle("Alice", ADDRESS)
        dto = UpdateCustomerHandler(repo).handle(created.id, "Alicia")
        assert dto.name == "Alicia"
        assert dto.address == created.address

    def test_new_address_activates_customer(self):
        repo = FakeCustomerRepository()
        created = CreateCustomerHandler(repo).handle("Alice")
        dto = UpdateCustomerHandler(repo).handle(created.id, "Alice", ADDRESS)
        assert dto.active is True
        assert repo.find(created.id).active is True

    def test_invalid_address_rejected_without_writes(self):
        repo = FakeCustomerRepository()
        created = CreateCustomerHandler(repo).handle("Alice")
        bad = AddressSpec(street="", number=1, zip_code="1", city="X")
        with pytest.raises(ValidationError, match="Street is required"):
            UpdateCustomerHandler(repo).handle(created.id, "Alice", bad)
        assert repo.writes == 1

    def test_missing_customer(self):
        with pytest.raises(EntityNotFoundError):
            UpdateCustomerHandler(FakeCustomerRepository()).handle("missing", "Alice")
