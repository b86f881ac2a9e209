"""
Currency and Money Module

Handles ISO 4217 currency codes and Decimal precision for every amount an
account sees. NEVER uses float for monetary values: floats coming in from
callers are converted through their string form.
"""

from decimal import Decimal, ROUND_HALF_UP, InvalidOperation, getcontext
from dataclasses import dataclass
from enum import Enum
from typing import Union

from .exceptions import InvalidAmountError

# Set global decimal context for financial precision
getcontext().prec = 28


class Currency(Enum):
    """ISO 4217 Currency Codes with precision info"""
    USD = ("USD", 2)  # US Dollar, 2 decimal places
    EUR = ("EUR", 2)  # Euro, 2 decimal places
    GBP = ("GBP", 2)  # British Pound, 2 decimal places
    JPY = ("JPY", 0)  # Japanese Yen, 0 decimal places
    CAD = ("CAD", 2)  # Canadian Dollar, 2 decimal places
    CHF = ("CHF", 2)  # Swiss Franc, 2 decimal places

    def __init__(self, code: str, precision: int):
        self.code = code
        self.precision = precision

    @classmethod
    def from_code(cls, code: str) -> 'Currency':
        """Look up a currency by its ISO code (case-insensitive)"""
        for currency in cls:
            if currency.code == code.strip().upper():
                return currency
        raise ValueError(f"Unsupported currency code: {code}")


@dataclass(frozen=True)
class Money:
    """
    Immutable money representation with currency and proper precision.
    Balances, limits and ledger amounts all use this class.
    """
    amount: Decimal
    currency: Currency

    def __post_init__(self):
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, 'amount', Decimal(str(self.amount)))

        # Round to currency precision
        try:
            rounded = validate_decimal_precision(self.amount, self.currency)
        except InvalidOperation:
            raise InvalidAmountError(self.amount, "Amount exceeds supported precision")
        object.__setattr__(self, 'amount', rounded)

    def __add__(self, other: 'Money') -> 'Money':
        if self.currency != other.currency:
            raise ValueError(f"Cannot add {self.currency.code} and {other.currency.code}")
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: 'Money') -> 'Money':
        if self.currency != other.currency:
            raise ValueError(f"Cannot subtract {other.currency.code} from {self.currency.code}")
        return Money(self.amount - other.amount, self.currency)

    def __neg__(self) -> 'Money':
        return Money(-self.amount, self.currency)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Money):
            return False
        return self.amount == other.amount and self.currency == other.currency

    def _check_comparable(self, other: 'Money') -> None:
        if self.currency != other.currency:
            raise ValueError(f"Cannot compare {self.currency.code} and {other.currency.code}")

    def __lt__(self, other: 'Money') -> bool:
        self._check_comparable(other)
        return self.amount < other.amount

    def __le__(self, other: 'Money') -> bool:
        self._check_comparable(other)
        return self.amount <= other.amount

    def __gt__(self, other: 'Money') -> bool:
        self._check_comparable(other)
        return self.amount > other.amount

    def __ge__(self, other: 'Money') -> bool:
        self._check_comparable(other)
        return self.amount >= other.amount

    def is_positive(self) -> bool:
        """Check if amount is positive"""
        return self.amount > Decimal('0')

    def is_negative(self) -> bool:
        """Check if amount is negative"""
        return self.amount < Decimal('0')

    def to_string(self) -> str:
        """Format for display"""
        if self.currency.precision == 0:
            return f"{self.currency.code} {self.amount:,.0f}"
        else:
            return f"{self.currency.code} {self.amount:,.{self.currency.precision}f}"

    @classmethod
    def zero(cls, currency: Currency) -> 'Money':
        return cls(Decimal('0'), currency)


AmountLike = Union[Money, Decimal, int, float, str]


def to_money(value: AmountLike, currency: Currency) -> Money:
    """
    Coerce a caller-supplied amount into Money of the given currency

    Args:
        value: Money, Decimal, int, float or numeric string
        currency: Currency the result must be expressed in

    Returns:
        Money holding exactly the given amount

    Raises:
        ValueError: If value is Money of a different currency
        InvalidAmountError: If value is not a finite number, has more decimal
            places than the currency allows, or is too large to represent
    """
    if isinstance(value, Money):
        if value.currency != currency:
            raise ValueError(
                f"Amount currency {value.currency.code} does not match account currency {currency.code}"
            )
        return value

    if isinstance(value, bool) or not isinstance(value, (Decimal, int, float, str)):
        raise InvalidAmountError(value, f"Amount must be a number, got {type(value).__name__}")

    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except InvalidOperation:
        raise InvalidAmountError(value, f"Cannot convert '{value}' to an amount")

    if not amount.is_finite():
        raise InvalidAmountError(value, f"Amount must be finite, got {value}")

    try:
        exact = validate_decimal_precision(amount, currency)
    except InvalidOperation:
        raise InvalidAmountError(value, "Amount exceeds supported precision")

    # Caller amounts are never rounded, only arithmetic results are
    if exact != amount:
        raise InvalidAmountError(
            value, f"Amount has more than {currency.precision} decimal places, got {value}"
        )

    return Money(exact, currency)


def validate_decimal_precision(value: Decimal, currency: Currency) -> Decimal:
    """
    Validate and round decimal to currency precision

    Args:
        value: Decimal to validate
        currency: Currency defining precision

    Returns:
        Properly rounded Decimal
    """
    return value.quantize(
        Decimal('0.1') ** currency.precision,
        rounding=ROUND_HALF_UP
    )
