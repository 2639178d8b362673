"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from checkout.domain.exceptions import (
    InvalidAmountError,
    InvalidQuantityError,
    ValidationError,
)
from checkout.domain.model.value_objects import Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("9.99"))
        assert m.amount == Decimal("9.99")
        assert m.currency == "USD"

    def test_of_factory_from_string(self):
        assert Money.of("4.99").amount == Decimal("4.99")

    def test_of_factory_from_float_is_exact(self):
        assert Money.of(2.99).amount == Decimal("2.99")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("abc")

    def test_non_decimal_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(9.99)  # type: ignore[arg-type]

    def test_negative_amount_rejected(self):
        with pytest.raises(InvalidAmountError, match="cannot be negative"):
            Money(Decimal("-0.01"))

    def test_negative_amount_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            Money.of("-5")

    def test_nan_rejected(self):
        with pytest.raises(InvalidAmountError, match="must be finite"):
            Money(Decimal("NaN"))

    def test_infinity_rejected(self):
        with pytest.raises(ValidationError, match="must be finite"):
            Money.of("Infinity")

    def test_zero(self):
        assert Money.zero() == Money.of("0")
        assert str(Money.zero()) == "$0.00"

    def test_addition(self):
        assert Money.of("9.99") + Money.of("4.99") == Money.of("14.98")

    def test_multiplication_by_int(self):
        assert Money.of("4.99") * 4 == Money.of("19.96")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("4.99") * 1.5  # type: ignore[operator]

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "USD") + Money(Decimal("5"), "EUR")

    def test_str_formatting(self):
        assert str(Money.of("9.99")) == "$9.99"
        assert str(Money.of("42.9")) == "$42.90"

    def test_plain_has_no_currency_symbol(self):
        assert Money.of("9.99").plain() == "9.99"
        assert Money.of("42.9").plain() == "42.90"


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(4).value == 4

    def test_zero_allowed(self):
        assert Quantity(0).value == 0

    def test_negative_rejected(self):
        with pytest.raises(InvalidQuantityError, match="cannot be negative"):
            Quantity(-1)

    def test_float_rejected(self):
        with pytest.raises(InvalidQuantityError, match="must be an integer"):
            Quantity(2.0)  # type: ignore[arg-type]

    def test_bool_rejected(self):
        with pytest.raises(InvalidQuantityError):
            Quantity(True)

    def test_str(self):
        assert str(Quantity(7)) == "7"
