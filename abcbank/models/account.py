"""Account models."""

import logging
from abc import ABC, abstractmethod
from decimal import Decimal, InvalidOperation

from abcbank.models.exceptions import InsufficientFundsError, InvalidAmountError
from abcbank.models.transaction import Transaction
from abcbank.services.interest import (
    FlatRateInterestPolicy,
    InterestPolicy,
    MaxiSavingsInterestPolicy,
    TieredInterestPolicy,
)
from abcbank.services.statement import render_statement
from abcbank.utils.clock import Clock

logger = logging.getLogger(__name__)


class Account(ABC):
    """Base class for bank accounts.

    An account owns an append-only transaction log and reads the current
    time only through the injected clock. The balance is always derived
    from the log.
    """

    account_type = "Account"

    def __init__(
        self,
        clock: Clock,
        account_id: int,
        owner_id: int,
        interest_policy: InterestPolicy | None = None,
        max_amount: Decimal | None = None,
    ):
        """
        Initialize an empty account.

        Args:
            clock: Source of the current time
            account_id: The account ID
            owner_id: The ID of the customer owning the account
            interest_policy: Overrides the account type's default policy
            max_amount: Maximum allowed amount per transaction (default: no limit)
        """
        self._clock = clock
        self.id = account_id
        self.owner_id = owner_id
        self._interest_policy = interest_policy or self.default_interest_policy()
        self._max_amount = max_amount
        self._transactions: list[Transaction] = []

    @classmethod
    def from_settings(cls, clock: Clock, account_id: int, owner_id: int, settings) -> "Account":
        """Open an account using the transaction limit and day-count basis from Settings."""
        return cls(
            clock,
            account_id,
            owner_id,
            interest_policy=cls.default_interest_policy(days_in_year=settings.days_in_year),
            max_amount=settings.max_transaction_amount,
        )

    @classmethod
    @abstractmethod
    def default_interest_policy(cls, days_in_year: int = 365) -> InterestPolicy:
        """Interest policy used when none is passed in."""

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        return tuple(self._transactions)

    @property
    def balance(self) -> Decimal:
        return sum((txn.amount for txn in self._transactions), Decimal("0"))

    def _validate_amount(self, amount, action: str) -> Decimal:
        """
        Convert an amount to Decimal and check it is usable.

        Raises:
            InvalidAmountError: If the amount is not a finite positive number
                or exceeds max_amount
        """
        if isinstance(amount, bool):
            raise InvalidAmountError(f"Cannot {action} a boolean amount: {amount!r}")
        if isinstance(amount, float):
            amount = str(amount)
        try:
            value = Decimal(amount)
        except (InvalidOperation, TypeError, ValueError) as err:
            raise InvalidAmountError(f"Cannot {action} non-numeric amount: {amount!r}") from err

        if not value.is_finite():
            raise InvalidAmountError(f"Cannot {action} non-finite amount: {amount!r}")
        if value < 0:
            raise InvalidAmountError(
                f"Cannot {action} negative amount: {value}. Amount must be positive."
            )
        if value == 0:
            raise InvalidAmountError(f"{action.capitalize()} amount must be greater than zero.")
        if self._max_amount is not None and value > self._max_amount:
            raise InvalidAmountError(
                f"Amount {value} exceeds maximum allowed {action} of {self._max_amount}"
            )
        return value

    def deposit(self, amount) -> Transaction:
        """
        Deposit funds into the account.

        Args:
            amount: The amount to deposit (must be positive)

        Returns:
            The recorded Transaction

        Raises:
            InvalidAmountError: If the amount is invalid
        """
        try:
            value = self._validate_amount(amount, "deposit")
        except InvalidAmountError:
            logger.warning("Rejected deposit of %r into account %s", amount, self.id)
            raise

        transaction = Transaction.create(value, self._clock)
        self._transactions.append(transaction)
        logger.debug("Account %s: deposited %s at %s", self.id, value, transaction.timestamp)
        return transaction

    def withdraw(self, amount) -> Transaction:
        """
        Withdraw funds from the account.

        Args:
            amount: The amount to withdraw (must be positive and <= balance)

        Returns:
            The recorded Transaction, carrying a negative amount

        Raises:
            InvalidAmountError: If the amount is invalid
            InsufficientFundsError: If the account has insufficient balance
        """
        try:
            value = self._validate_amount(amount, "withdraw")
        except InvalidAmountError:
            logger.warning("Rejected withdrawal of %r from account %s", amount, self.id)
            raise

        balance = self.balance
        if value > balance:
            logger.warning("Account %s: insufficient funds for withdrawal of %s", self.id, value)
            raise InsufficientFundsError(
                f"Insufficient balance: {balance} available, {value} requested"
            )

        transaction = Transaction.create(-value, self._clock)
        self._transactions.append(transaction)
        logger.debug("Account %s: withdrew %s at %s", self.id, value, transaction.timestamp)
        return transaction

    def calculate_interest_earned(self) -> Decimal:
        """Interest earned from the first transaction up to the clock's current time."""
        return self._interest_policy.calculate(self._transactions, self._clock.now())

    def get_account_statement(self) -> str:
        return render_statement(self)


class CheckingAccount(Account):
    """Checking account earning a flat 0.1% per annum."""

    account_type = "Checking"

    @classmethod
    def default_interest_policy(cls, days_in_year: int = 365) -> InterestPolicy:
        return FlatRateInterestPolicy(Decimal("0.001"), days_in_year=days_in_year)


class SavingsAccount(Account):
    """Savings account earning 0.1% on the first 1,000 and 0.2% above."""

    account_type = "Savings"

    @classmethod
    def default_interest_policy(cls, days_in_year: int = 365) -> InterestPolicy:
        return TieredInterestPolicy(
            [(Decimal("1000"), Decimal("0.001")), (None, Decimal("0.002"))],
            days_in_year=days_in_year,
        )


class MaxiSavingsAccount(Account):
    """Savings account whose rate drops after a recent withdrawal."""

    account_type = "Maxi-Savings"

    @classmethod
    def from_settings(cls, clock, account_id, owner_id, settings) -> "MaxiSavingsAccount":
        return cls(
            clock,
            account_id,
            owner_id,
            interest_policy=MaxiSavingsInterestPolicy.from_settings(settings),
            max_amount=settings.max_transaction_amount,
        )

    @classmethod
    def default_interest_policy(cls, days_in_year: int = 365) -> InterestPolicy:
        return MaxiSavingsInterestPolicy(days_in_year=days_in_year)
