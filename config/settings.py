"""Configuration management for abcbank."""
import logging
import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from dotenv import load_dotenv


def _decimal_env(name: str, default: Decimal | None) -> Decimal | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        value = Decimal(raw)
    except InvalidOperation as err:
        raise ValueError(f"{name} must be a decimal number, got {raw!r}") from err
    if not value.is_finite():
        raise ValueError(f"{name} must be a finite number, got {raw!r}")
    return value


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return int(raw)
    except ValueError as err:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from err


@dataclass
class Settings:
    """Configuration settings for abcbank.

    Defaults reproduce the standard Maxi-Savings terms: 5% per annum,
    dropping to 1% for ten days after any withdrawal, compounded daily
    on a 365-day year.
    """

    # Maxi-Savings interest
    maxi_savings_high_rate: Decimal = Decimal('0.05')
    maxi_savings_low_rate: Decimal = Decimal('0.01')
    withdrawal_window_days: int = 10
    days_in_year: int = 365

    # Business Rules
    max_transaction_amount: Decimal | None = None

    # Logging
    log_file: str = 'abcbank.log'
    log_level: str = 'INFO'

    def __post_init__(self):
        if self.maxi_savings_high_rate < 0 or self.maxi_savings_low_rate < 0:
            raise ValueError("Interest rates must not be negative")
        if self.withdrawal_window_days <= 0:
            raise ValueError("withdrawal_window_days must be positive")
        if self.days_in_year <= 0:
            raise ValueError("days_in_year must be positive")
        if self.max_transaction_amount is not None and self.max_transaction_amount <= 0:
            raise ValueError("max_transaction_amount must be positive")
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"log_level must be a logging level name, got {self.log_level!r}")

    @classmethod
    def load(cls, dotenv_path: str | None = None) -> 'Settings':
        """Load settings from environment variables.

        Variables from a ``.env`` file are loaded first; variables already
        present in the environment take precedence.

        Args:
            dotenv_path: Explicit ``.env`` file; searched for when omitted.

        Returns:
            Settings: A Settings instance with values from environment variables.

        Raises:
            ValueError: If an environment variable holds an invalid value.
        """
        load_dotenv(dotenv_path)

        defaults = cls()
        return cls(
            maxi_savings_high_rate=_decimal_env('ABCBANK_MAXI_HIGH_RATE', defaults.maxi_savings_high_rate),
            maxi_savings_low_rate=_decimal_env('ABCBANK_MAXI_LOW_RATE', defaults.maxi_savings_low_rate),
            withdrawal_window_days=_int_env('ABCBANK_WITHDRAWAL_WINDOW_DAYS', defaults.withdrawal_window_days),
            days_in_year=_int_env('ABCBANK_DAYS_IN_YEAR', defaults.days_in_year),
            max_transaction_amount=_decimal_env('ABCBANK_MAX_TRANSACTION_AMOUNT', None),
            log_file=os.getenv('ABCBANK_LOG_FILE', defaults.log_file),
            log_level=os.getenv('ABCBANK_LOG_LEVEL', defaults.log_level).upper(),
        )
