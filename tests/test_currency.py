"""
Test suite for currency module

Tests Money class, amount coercion, and proper Decimal handling.
All monetary calculations must use Decimal precision.
"""

import pytest
from decimal import Decimal

from bank_account.currency import (
    Money, Currency, to_money, validate_decimal_precision
)
from bank_account.exceptions import InvalidAmountError


class TestCurrency:
    """Test Currency enum"""

    def test_precision(self):
        assert Currency.USD.code == "USD"
        assert Currency.USD.precision == 2
        assert Currency.JPY.precision == 0

    def test_from_code(self):
        assert Currency.from_code("EUR") == Currency.EUR
        assert Currency.from_code(" gbp ") == Currency.GBP

        with pytest.raises(ValueError, match="Unsupported currency code"):
            Currency.from_code("XYZ")


class TestMoney:
    """Test Money class operations"""

    def test_money_creation(self):
        """Test Money object creation and validation"""
        money = Money(Decimal('100.50'), Currency.USD)
        assert money.amount == Decimal('100.50')
        assert money.currency == Currency.USD

        # Test automatic rounding to currency precision
        money_rounded = Money(Decimal('100.555'), Currency.USD)
        assert money_rounded.amount == Decimal('100.56')

        # Test JPY (0 decimal places)
        money_jpy = Money(Decimal('100.7'), Currency.JPY)
        assert money_jpy.amount == Decimal('101')

    def test_float_input_is_exact(self):
        """Floats go through str() so 0.1 + 0.2 stays exact"""
        total = Money(0.1, Currency.USD) + Money(0.2, Currency.USD)
        assert total == Money(Decimal('0.30'), Currency.USD)

    def test_money_arithmetic(self):
        """Test Money arithmetic operations"""
        money1 = Money(Decimal('100.50'), Currency.USD)
        money2 = Money(Decimal('50.25'), Currency.USD)

        assert (money1 + money2).amount == Decimal('150.75')
        assert (money1 - money2).amount == Decimal('50.25')
        assert (-money1).amount == Decimal('-100.50')

    def test_money_comparison(self):
        """Test Money comparison operations"""
        money1 = Money(Decimal('100.00'), Currency.USD)
        money2 = Money(Decimal('50.00'), Currency.USD)
        money3 = Money(Decimal('100.00'), Currency.USD)

        assert money1 == money3
        assert money1 != money2
        assert money1 > money2
        assert money2 < money1
        assert money1 >= money3
        assert money1 <= money3
        assert hash(money1) == hash(money3)

    def test_money_currency_mismatch(self):
        """Test that operations with different currencies raise errors"""
        usd_money = Money(Decimal('100.00'), Currency.USD)
        eur_money = Money(Decimal('100.00'), Currency.EUR)

        with pytest.raises(ValueError, match="Cannot add USD and EUR"):
            usd_money + eur_money

        with pytest.raises(ValueError, match="Cannot subtract EUR from USD"):
            usd_money - eur_money

        with pytest.raises(ValueError, match="Cannot compare USD and EUR"):
            usd_money < eur_money

    def test_money_state_checks(self):
        """Test Money state checking methods"""
        zero_money = Money.zero(Currency.USD)
        positive_money = Money(Decimal('100.50'), Currency.USD)
        negative_money = Money(Decimal('-50.25'), Currency.USD)

        assert positive_money.is_positive()
        assert not zero_money.is_positive()

        assert negative_money.is_negative()
        assert not zero_money.is_negative()

    def test_money_string_formatting(self):
        """Test Money string representation"""
        assert Money(Decimal('1234.56'), Currency.USD).to_string() == "USD 1,234.56"
        assert Money(Decimal('1234'), Currency.JPY).to_string() == "JPY 1,234"
        assert Money(Decimal('-100'), Currency.USD).to_string() == "USD -100.00"


class TestToMoney:
    """Test coercion of caller-supplied amounts"""

    @pytest.mark.parametrize("value", [500, 500.0, "500", Decimal("500.00")])
    def test_numeric_inputs(self, value):
        assert to_money(value, Currency.USD) == Money(Decimal('500.00'), Currency.USD)

    def test_money_passthrough(self):
        money = Money(Decimal('12.34'), Currency.EUR)
        assert to_money(money, Currency.EUR) is money

    def test_money_wrong_currency(self):
        with pytest.raises(ValueError, match="does not match account currency"):
            to_money(Money(Decimal('1'), Currency.EUR), Currency.USD)

    @pytest.mark.parametrize("value", ["abc", None, True, [1], "NaN", float("inf")])
    def test_rejects_non_numbers(self, value):
        with pytest.raises(InvalidAmountError):
            to_money(value, Currency.USD)

    @pytest.mark.parametrize("value, currency", [
        (Decimal("0.005"), Currency.USD),
        ("1000.555", Currency.USD),
        (0.001, Currency.EUR),
        (Decimal("100.5"), Currency.JPY),
    ])
    def test_rejects_sub_unit_amounts(self, value, currency):
        """Caller amounts are kept exact, never rounded"""
        with pytest.raises(InvalidAmountError, match="decimal places"):
            to_money(value, currency)

    def test_trailing_zeros_are_not_extra_places(self):
        assert to_money(Decimal("12.3000"), Currency.USD) == Money(Decimal("12.30"), Currency.USD)
        assert to_money("7.0", Currency.JPY) == Money(Decimal("7"), Currency.JPY)

    def test_rejects_oversized_amount(self):
        with pytest.raises(InvalidAmountError, match="exceeds supported precision"):
            to_money(Decimal("1e27"), Currency.USD)

    def test_arithmetic_overflow_is_invalid_amount(self):
        big = to_money(Decimal("9e25"), Currency.USD)
        with pytest.raises(InvalidAmountError, match="exceeds supported precision"):
            big + big


class TestUtilityFunctions:
    """Test utility functions"""

    def test_validate_decimal_precision(self):
        assert validate_decimal_precision(Decimal('100.555'), Currency.USD) == Decimal('100.56')
        assert validate_decimal_precision(Decimal('100.5'), Currency.JPY) == Decimal('101')
        assert validate_decimal_precision(Decimal('-0.005'), Currency.USD) == Decimal('-0.01')
