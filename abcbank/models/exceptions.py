"""Custom exceptions for the banking system."""


class BankError(Exception):
    """Base exception for all banking-related errors."""
    pass


class InvalidAmountError(BankError):
    """Raised when an invalid amount is provided (e.g., zero or negative amount)."""
    pass


class InsufficientFundsError(BankError):
    """Raised when a withdrawal exceeds the account balance."""
    pass
