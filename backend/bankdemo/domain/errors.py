"""Account errors.

Three classified failures, all subclasses of AccountError:
  - NegativeAmountError: deposit of a negative amount
  - OverdraftError: withdrawal above the balance or above a withdrawal limit
  - InvalidAccountOperationError: any mutation on a closed account
Anything else reaching the console driver is reported as unexpected.
"""

from __future__ import annotations


class AccountError(Exception):
    """Base account error."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NegativeAmountError(AccountError):
    def __init__(self, message: str = "Negative deposit amount") -> None:
        super().__init__(message)


class OverdraftError(AccountError):
    def __init__(self, message: str = "Insufficient funds") -> None:
        super().__init__(message)


class InvalidAccountOperationError(AccountError):
    pass
