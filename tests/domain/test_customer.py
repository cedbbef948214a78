"""Unit tests for the Customer aggregate."""

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.customer import Customer
from storefront.domain.model.value_objects import Address

ADDRESS = Address("Main St", 12, "12345", "Springfield")


class TestCustomer:

    def test_new_customer_is_inactive(self):
        customer = Customer(id="c1", name="Alice")
        assert customer.active is False
        assert customer.reward_points == 0

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError, match="Name is required"):
            Customer(id="c1", name="")

    def test_change_name(self):
        customer = Customer(id="c1", name="Alice")
        customer.change_name("Alicia")
        assert customer.name == "Alicia"

    def test_rejected_name_leaves_customer_unchanged(self):
        customer = Customer(id="c1", name="Alice")
        with pytest.raises(ValidationError):
            customer.change_name("")
        assert customer.name == "Alice"

    def test_activate_requires_address(self):
        customer = Customer(id="c1", name="Alice")
        with pytest.raises(ValidationError, match="Address is mandatory"):
            customer.activate()

    def test_activate_and_deactivate(self):
        customer = Customer(id="c1", name="Alice", address=ADDRESS)
        customer.activate()
        assert customer.active
        customer.deactivate()
        assert not customer.active

    def test_active_without_address_rejected(self):
        with pytest.raises(ValidationError, match="Address is mandatory"):
            Customer(id="c1", name="Alice", active=True)

    def test_reward_points_accumulate(self):
        customer = Customer(id="c1", name="Alice")
        customer.add_reward_points(10)
        customer.add_reward_points(5)
        assert customer.reward_points == 15

    def test_non_positive_reward_points_rejected(self):
        customer = Customer(id="c1", name="Alice")
        with pytest.raises(ValidationError, match="must be positive"):
            customer.add_reward_points(0)
