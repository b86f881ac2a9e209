"""
Account Module

A single bank account: balance, overdraft policy and transaction ledger.
Deposits and withdrawals are validated before anything changes, and every
successful operation is recorded in the ledger under the account lock, so a
rejected call leaves the account exactly as it was.
"""

from enum import Enum
from typing import Optional, Tuple
import threading
import uuid

from .currency import Money, Currency, AmountLike, to_money
from .exceptions import InvalidAmountError, InsufficientFundsError
from .ledger import Ledger, Transaction, TransactionType
from .config import get_config
from .logging_config import get_logger, log_action


class AccountType(Enum):
    """Banking product types"""
    SAVINGS = "savings"
    CHECKING = "checking"


class Account:
    """
    Bank account with overdraft limit and append-only ledger

    Invariant: balance >= -overdraft_limit after every operation.
    The initial deposit is recorded exactly as given, with no sign check.
    """

    def __init__(
        self,
        holder: str,
        account_type: AccountType,
        initial_deposit: AmountLike,
        overdraft_limit: Optional[AmountLike] = None,
        currency: Optional[Currency] = None,
    ):
        settings = get_config()
        self.id = str(uuid.uuid4())
        self._holder = holder
        self._account_type = account_type
        self._currency = currency or settings.currency

        if overdraft_limit is None:
            overdraft_limit = settings.default_overdraft_limit
        limit = to_money(overdraft_limit, self._currency)
        if limit.is_negative():
            raise InvalidAmountError(overdraft_limit, f"Overdraft limit cannot be negative, got {overdraft_limit}")
        self._overdraft_limit = limit

        self._balance = to_money(initial_deposit, self._currency)
        self._ledger = Ledger(self._currency)
        self._ledger.append(Transaction(
            transaction_type=TransactionType.INITIAL_DEPOSIT,
            amount=self._balance,
            balance_after=self._balance,
        ))
        self._lock = threading.RLock()
        self.logger = get_logger("bank_account.accounts")

        log_action(
            self.logger, "info", f"Account opened: {account_type.value}",
            action="open_account", resource=f"account:{self.id}",
            details={
                "holder": holder,
                "initial_deposit": self._balance.to_string(),
                "overdraft_limit": self._overdraft_limit.to_string(),
            }
        )

    # Properties

    @property
    def holder(self) -> str:
        return self._holder

    @property
    def account_type(self) -> AccountType:
        return self._account_type

    @property
    def currency(self) -> Currency:
        return self._currency

    @property
    def overdraft_limit(self) -> Money:
        return self._overdraft_limit

    @property
    def balance(self) -> Money:
        with self._lock:
            return self._balance

    @property
    def transactions(self) -> Tuple[Transaction, ...]:
        with self._lock:
            return self._ledger.snapshot()

    @property
    def available_balance(self) -> Money:
        """Largest amount a withdrawal may take right now"""
        with self._lock:
            return self._balance + self._overdraft_limit

    @property
    def is_overdrawn(self) -> bool:
        return self.balance.is_negative()

    # Operations

    def deposit(self, amount: AmountLike) -> Transaction:
        """
        Deposit a positive amount

        Args:
            amount: Amount to add to the balance

        Returns:
            The ledger entry recorded for the deposit

        Raises:
            InvalidAmountError: If amount is not positive or not representable
                in the account currency
        """
        money = self._validate_amount(amount)

        with self._lock:
            new_balance = self._balance + money
            transaction = Transaction(
                transaction_type=TransactionType.DEPOSIT,
                amount=money,
                balance_after=new_balance,
            )
            self._ledger.append(transaction)
            self._balance = new_balance

        self._log_mutation("deposit", transaction)
        return transaction

    def withdraw(self, amount: AmountLike) -> Transaction:
        """
        Withdraw a positive amount, drawing on the overdraft if needed

        Args:
            amount: Amount to take from the balance

        Returns:
            The ledger entry recorded for the withdrawal

        Raises:
            InvalidAmountError: If amount is not positive or not representable
                in the account currency
            InsufficientFundsError: If amount exceeds balance plus overdraft limit
        """
        money = self._validate_amount(amount)

        with self._lock:
            available = self._balance + self._overdraft_limit
            if money > available:
                raise InsufficientFundsError(requested=money, available=available)

            new_balance = self._balance - money
            transaction = Transaction(
                transaction_type=TransactionType.WITHDRAWAL,
                amount=money,
                balance_after=new_balance,
            )
            self._ledger.append(transaction)
            self._balance = new_balance

        self._log_mutation("withdraw", transaction)
        return transaction

    def can_withdraw(self, amount: AmountLike) -> bool:
        """Check whether withdraw(amount) would succeed, without changing anything"""
        try:
            money = self._validate_amount(amount)
        except InvalidAmountError:
            return False
        return money <= self.available_balance

    # Accessors

    def get_balance(self) -> Money:
        return self.balance

    def get_transaction_history(self) -> Tuple[Transaction, ...]:
        """Ledger entries oldest first, as an immutable snapshot"""
        return self.transactions

    def get_account_holder(self) -> str:
        return self._holder

    def get_account_type(self) -> AccountType:
        return self._account_type

    def get_overdraft_limit(self) -> Money:
        return self._overdraft_limit

    # Helpers

    def _validate_amount(self, amount: AmountLike) -> Money:
        money = to_money(amount, self._currency)
        if not money.is_positive():
            raise InvalidAmountError(amount)
        return money

    def _log_mutation(self, action: str, transaction: Transaction) -> None:
        log_action(
            self.logger, "info", f"{transaction.description}: {transaction.amount.to_string()}",
            action=action, resource=f"account:{self.id}",
            details={
                "transaction_id": transaction.id,
                "amount": transaction.amount.to_string(),
                "balance": transaction.balance_after.to_string(),
            }
        )

    def __repr__(self) -> str:
        return (
            f"Account(holder={self._holder!r}, type={self._account_type.value}, "
            f"balance={self.balance.to_string()}, "
            f"overdraft_limit={self._overdraft_limit.to_string()})"
        )
