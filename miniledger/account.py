"""
account.py - Account records held by the registry.
"""


class Account:
    """A named balance-and-nonce record."""

    def __init__(self, account_id: str, balance: int = 0, nonce: int = 0):
        self.account_id = account_id
        self.balance = balance  # Smallest currency unit, never negative
        self.nonce = nonce      # Outgoing transaction count, never decreases

    def to_dict(self) -> dict:
        return {
            "account_id": self.account_id,
            "balance": self.balance,
            "nonce": self.nonce,
        }

    def __eq__(self, other):
        if not isinstance(other, Account):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return f"Account({self.account_id}, balance={self.balance}, nonce={self.nonce})"
