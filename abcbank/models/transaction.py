"""Transaction data model."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from abcbank.utils.clock import Clock


@dataclass(frozen=True)
class Transaction:
    """Represents a single entry in an account's transaction log.

    Positive amounts are deposits, negative amounts are withdrawals.
    """

    amount: Decimal
    timestamp: datetime

    @property
    def is_deposit(self) -> bool:
        return self.amount > 0

    @property
    def is_withdrawal(self) -> bool:
        return self.amount < 0

    @property
    def kind(self) -> str:
        """Human-readable transaction type."""
        return "withdrawal" if self.is_withdrawal else "deposit"

    @classmethod
    def create(cls, amount: Decimal, clock: Clock) -> "Transaction":
        """
        Create a transaction stamped with the clock's current time.

        Args:
            amount: The signed transaction amount
            clock: The clock supplying the timestamp

        Returns:
            A new immutable Transaction
        """
        return cls(amount=amount, timestamp=clock.now())
