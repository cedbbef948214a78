"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Address, Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_int(self):
        assert Money.of(10).amount == Decimal("10")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten")

    def test_zero_is_allowed(self):
        assert Money.of(0) == Money.zero()

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(1.5)  # type: ignore[arg-type]

    @pytest.mark.parametrize("raw", ["Infinity", "-Infinity", "NaN"])
    def test_non_finite_amount_rejected(self, raw):
        with pytest.raises(ValidationError, match="finite number"):
            Money(Decimal(raw))

    def test_more_than_two_decimal_places_rejected(self):
        with pytest.raises(ValidationError, match="more than 2 decimal places"):
            Money.of("0.333")

    def test_trailing_zeros_within_scale_accepted(self):
        assert Money.of("1.50") == Money.of("1.5")
        assert Money.of("1E+2") == Money.of(100)

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("7.50") * 1.5  # type: ignore[operator]

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("9.5")) == "$9.50"

    def test_comparison_operators(self):
        assert Money.of("5") < Money.of("10")
        assert Money.of("10") > Money.of("5")
        assert Money.of("10") >= Money.of("10")
        assert Money.of("10") <= Money.of("10")


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(-3)

    def test_non_integer_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(1.5)  # type: ignore[arg-type]


# ── Address ──────────────────────────────────────────────────────────────────


class TestAddress:

    def test_valid_address(self):
        address = Address("Main St", 12, "12345-000", "Springfield")
        assert str(address) == "Main St, 12, 12345-000 Springfield"

    @pytest.mark.parametrize(
        "kwargs, message",
        [
            ({"street": ""}, "Street is required"),
            ({"number": 0}, "Number must be a positive integer"),
            ({"zip_code": " "}, "Zip code is required"),
            ({"city": ""}, "City is required"),
        ],
    )
    def test_missing_parts_rejected(self, kwargs, message):
        fields = {"street": "Main St", "number": 12, "zip_code": "12345", "city": "Springfield"}
        fields.update(kwargs)
        with pytest.raises(ValidationError, match=message):
            Address(**fields)
