"""
Account Errors

Domain rule violations raised by account operations. All of them are
ValueErrors so callers that only care about "bad input" can catch that.
"""

from typing import Any, Optional


class AccountError(ValueError):
    """Base class for account rule violations"""


class InvalidAmountError(AccountError):
    """Amount is not a positive number"""

    def __init__(self, amount: Any, message: Optional[str] = None):
        self.amount = amount
        super().__init__(message or f"Amount must be positive, got {amount}")


class InsufficientFundsError(AccountError):
    """Withdrawal exceeds balance plus overdraft limit"""

    def __init__(self, requested, available):
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient funds, including overdraft limit: "
            f"available {available.to_string()}, requested {requested.to_string()}"
        )
