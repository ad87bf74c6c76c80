"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from stockbook.domain.exceptions import ValidationError
from stockbook.domain.model.value_objects import Money, total


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")

    def test_of_factory_from_string(self):
        m = Money.of("25.99")
        assert m.amount == Decimal("25.99")

    def test_of_factory_from_float_keeps_short_form(self):
        assert Money.of(2.5).amount == Decimal("2.5")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("abc")

    def test_zero_allowed(self):
        assert Money.of("0") == Money.zero()

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_non_finite_rejected(self):
        with pytest.raises(ValidationError, match="finite"):
            Money(Decimal("NaN"))

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(2.5)

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("7.50") * 1.5

    def test_str_uses_rupee_symbol(self):
        assert str(Money.of("15")) == "₹15.00"
        assert str(Money.of("9.5")) == "₹9.50"

    def test_format_with_custom_symbol(self):
        assert Money.of("55").format("Rs") == "Rs55.00"

    def test_plain_is_bare_decimal(self):
        assert Money.of("2.50").plain() == "2.50"

    def test_comparison_operators(self):
        assert Money.of("5") < Money.of("10")
        assert Money.of("10") > Money.of("5")
        assert Money.of("10") >= Money.of("10")
        assert Money.of("10") <= Money.of("10")


class TestTotal:

    def test_empty_is_zero(self):
        assert total([]) == Money.zero()

    def test_decimal_sum_has_no_drift(self):
        amounts = [Money.of("0.10")] * 3
        assert total(amounts).format("") == "0.30"


class TestMoneyRounding:

    def test_half_cent_rounds_up(self):
        assert Money.of("2.125").format() == "₹2.13"

    def test_rounded_value(self):
        assert Money.of("0.005").rounded() == Decimal("0.01")
        assert Money.of("2.124").rounded() == Decimal("2.12")
