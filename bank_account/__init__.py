"""
Bank Account Core

A single bank account with overdraft policy and an append-only
transaction ledger. All amounts use Decimal via Money.
"""

from .accounts import Account, AccountType
from .currency import Currency, Money
from .exceptions import AccountError, InvalidAmountError, InsufficientFundsError
from .ledger import Ledger, Transaction, TransactionType

__version__ = "1.0.0"

__all__ = [
    "Account",
    "AccountType",
    "Currency",
    "Money",
    "AccountError",
    "InvalidAmountError",
    "InsufficientFundsError",
    "Ledger",
    "Transaction",
    "TransactionType",
]
