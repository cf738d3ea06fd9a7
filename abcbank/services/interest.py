"""Interest policies for daily-compounding accounts."""

import logging
from abc import ABC, abstractmethod
from collections import defaultdict
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Iterable, Sequence

if TYPE_CHECKING:
    from abcbank.models.transaction import Transaction

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


class InterestPolicy(ABC):
    """Accrues interest day by day over an account's transaction log.

    Day 0 is the calendar date of the earliest transaction. Each day the
    policy is asked for the interest earned on the balance so far, which
    includes interest already accrued, so the result compounds daily.
    """

    def __init__(self, days_in_year: int = 365):
        if days_in_year <= 0:
            raise ValueError(f"days_in_year must be positive, got {days_in_year}")
        self.days_in_year = days_in_year

    def calculate(self, transactions: Sequence["Transaction"], now: datetime) -> Decimal:
        """
        Calculate the interest earned up to ``now``.

        Args:
            transactions: The account's transaction log
            now: The instant to accrue up to

        Returns:
            The accrued interest; zero when no full day has elapsed
        """
        if not transactions:
            return ZERO

        start = min(txn.timestamp.date() for txn in transactions)
        days = (now.date() - start).days
        if days <= 0:
            return ZERO

        movements = defaultdict(lambda: ZERO)
        withdrawal_days = set()
        for txn in transactions:
            day = (txn.timestamp.date() - start).days
            movements[day] += txn.amount
            if txn.is_withdrawal:
                withdrawal_days.add(day)

        principal = ZERO
        accrued = ZERO
        for day in range(days):
            principal += movements.get(day, ZERO)
            accrued += self.daily_interest(principal + accrued, day, withdrawal_days)

        logger.debug("Accrued %s over %d days with %s", accrued, days, type(self).__name__)
        return accrued

    def _daily(self, amount: Decimal, annual_rate: Decimal) -> Decimal:
        return amount * annual_rate / self.days_in_year

    @abstractmethod
    def daily_interest(self, balance: Decimal, day: int, withdrawal_days: Iterable[int]) -> Decimal:
        """Interest earned on ``balance`` during day ``day``."""


class FlatRateInterestPolicy(InterestPolicy):
    """Single annual rate on the whole balance."""

    def __init__(self, rate: Decimal, days_in_year: int = 365):
        super().__init__(days_in_year)
        self.rate = Decimal(rate)

    def daily_interest(self, balance: Decimal, day: int, withdrawal_days: Iterable[int]) -> Decimal:
        if balance <= 0:
            return ZERO
        return self._daily(balance, self.rate)


class TieredInterestPolicy(InterestPolicy):
    """Annual rates applied to successive slices of the balance.

    ``tiers`` is a list of ``(limit, rate)`` pairs ordered by limit; the last
    pair uses ``None`` as its limit and covers everything above.
    """

    def __init__(self, tiers: list[tuple[Decimal | None, Decimal]], days_in_year: int = 365):
        super().__init__(days_in_year)
        if not tiers or tiers[-1][0] is not None:
            raise ValueError("The last tier must have no upper limit")
        self.tiers = [(None if limit is None else Decimal(limit), Decimal(rate)) for limit, rate in tiers]

    def daily_interest(self, balance: Decimal, day: int, withdrawal_days: Iterable[int]) -> Decimal:
        if balance <= 0:
            return ZERO

        interest = ZERO
        lower = ZERO
        for limit, rate in self.tiers:
            if limit is None or balance <= limit:
                interest += self._daily(balance - lower, rate)
                break
            interest += self._daily(limit - lower, rate)
            lower = limit
        return interest


class MaxiSavingsInterestPolicy(InterestPolicy):
    """Higher rate unless a withdrawal happened within the trailing window.

    A withdrawal on day ``w`` lowers the rate for days ``w`` through
    ``w + window_days - 1``; from day ``w + window_days`` on it no longer
    counts as recent.
    """

    def __init__(
        self,
        high_rate: Decimal = Decimal("0.05"),
        low_rate: Decimal = Decimal("0.01"),
        window_days: int = 10,
        days_in_year: int = 365,
    ):
        super().__init__(days_in_year)
        if window_days <= 0:
            raise ValueError(f"window_days must be positive, got {window_days}")
        self.high_rate = Decimal(high_rate)
        self.low_rate = Decimal(low_rate)
        self.window_days = window_days

    @classmethod
    def from_settings(cls, settings) -> "MaxiSavingsInterestPolicy":
        return cls(
            high_rate=settings.maxi_savings_high_rate,
            low_rate=settings.maxi_savings_low_rate,
            window_days=settings.withdrawal_window_days,
            days_in_year=settings.days_in_year,
        )

    def had_recent_withdrawal(self, day: int, withdrawal_days: Iterable[int]) -> bool:
        return any(0 <= day - withdrawn < self.window_days for withdrawn in withdrawal_days)

    def daily_interest(self, balance: Decimal, day: int, withdrawal_days: Iterable[int]) -> Decimal:
        if balance <= 0:
            return ZERO
        rate = self.low_rate if self.had_recent_withdrawal(day, withdrawal_days) else self.high_rate
        return self._daily(balance, rate)
