"""Data models for the banking system."""

from .account import Account, CheckingAccount, MaxiSavingsAccount, SavingsAccount
from .transaction import Transaction
from .exceptions import (
    BankError,
    InsufficientFundsError,
    InvalidAmountError,
)

__all__ = [
    "Account",
    "CheckingAccount",
    "MaxiSavingsAccount",
    "SavingsAccount",
    "Transaction",
    "BankError",
    "InsufficientFundsError",
    "InvalidAmountError",
]
