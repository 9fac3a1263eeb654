"""
errors.py - Transaction rejection kinds for MiniLedger.
Every rejection is an expected business outcome, never a fault.
"""

from enum import Enum


class TransactionError(Enum):
    """Closed set of reasons a transaction can be rejected."""

    AMOUNT_IS_ZERO = "AMOUNT_IS_ZERO"
    SENDER_IS_RECEIVER = "SENDER_IS_RECEIVER"
    ACCOUNT_NOT_FOUND = "ACCOUNT_NOT_FOUND"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    INVALID_NONCE = "INVALID_NONCE"


class TransactionRejected(ValueError):
    """Raised by the engine when a transaction fails validation."""

    def __init__(self, error: TransactionError, message: str = None):
        self.error = error
        self.message = message or error.value
        super().__init__(self.message)

    @property
    def code(self) -> str:
        return self.error.value
