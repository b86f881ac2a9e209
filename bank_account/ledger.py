"""
Transaction Ledger

Ordered, append-only record of every balance-affecting event on an account.
Entries are immutable once recorded; the ledger only ever grows.
"""

from datetime import datetime, timezone
from dataclasses import dataclass, field
from typing import Iterator, List, Tuple
from enum import Enum
import uuid

from .currency import Money, Currency


class TransactionType(Enum):
    """Kinds of ledger entries and their labels"""
    INITIAL_DEPOSIT = "Initial Deposit"
    DEPOSIT = "Deposit"
    WITHDRAWAL = "Withdrawal"

    @property
    def is_credit(self) -> bool:
        return self is not TransactionType.WITHDRAWAL


@dataclass(frozen=True)
class Transaction:
    """
    Single immutable ledger entry

    ``amount`` is what the caller asked for; the direction comes from
    ``transaction_type``.
    """
    transaction_type: TransactionType
    amount: Money
    balance_after: Money
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def __post_init__(self):
        if self.amount.currency != self.balance_after.currency:
            raise ValueError("Transaction amount and balance must use same currency")

    @property
    def description(self) -> str:
        return self.transaction_type.value

    @property
    def currency(self) -> Currency:
        return self.amount.currency

    @property
    def signed_amount(self) -> Money:
        """Effect of this entry on the balance"""
        if self.transaction_type.is_credit:
            return self.amount
        return -self.amount

    def to_string(self) -> str:
        """Format for display"""
        return f"{self.timestamp.isoformat()} - {self.description}: {self.amount.to_string()}"


class Ledger:
    """
    Append-only sequence of transactions for one account

    Supports len(), iteration and indexing. Entries are never removed or
    replaced.
    """

    def __init__(self, currency: Currency):
        self.currency = currency
        self._entries: List[Transaction] = []

    def append(self, transaction: Transaction) -> None:
        """Record a transaction at the end of the ledger"""
        if transaction.currency != self.currency:
            raise ValueError(
                f"Cannot record {transaction.currency.code} transaction in {self.currency.code} ledger"
            )
        self._entries.append(transaction)

    def snapshot(self) -> Tuple[Transaction, ...]:
        """Immutable copy of the entries, oldest first"""
        return tuple(self._entries)

    def total_credits(self) -> Money:
        """Sum of initial deposit and deposits"""
        total = Money.zero(self.currency)
        for entry in self._entries:
            if entry.transaction_type.is_credit:
                total = total + entry.amount
        return total

    def total_debits(self) -> Money:
        """Sum of withdrawals"""
        total = Money.zero(self.currency)
        for entry in self._entries:
            if not entry.transaction_type.is_credit:
                total = total + entry.amount
        return total

    def net_total(self) -> Money:
        """Balance implied by the entries"""
        return self.total_credits() - self.total_debits()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self.snapshot())

    def __getitem__(self, index: int) -> Transaction:
        return self._entries[index]

    def __repr__(self) -> str:
        return f"Ledger(currency={self.currency.code}, entries={len(self._entries)})"
