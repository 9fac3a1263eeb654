"""
transaction.py - Balance transfer requests for MiniLedger.
A transaction moves `amount` from sender to receiver and must carry
the sender's current nonce.
"""

import json
from nacl.hash import sha256
from nacl.encoding import HexEncoder


class Transaction:
    """An immutable request to move value from sender to receiver."""

    FIELDS = ("sender", "receiver", "amount", "nonce")
    __slots__ = FIELDS

    def __init__(self, sender: str, receiver: str, amount: int, nonce: int):
        object.__setattr__(self, "sender", sender)
        object.__setattr__(self, "receiver", receiver)
        object.__setattr__(self, "amount", amount)
        object.__setattr__(self, "nonce", nonce)

    def __setattr__(self, name, value):
        raise AttributeError(f"Transaction is immutable, cannot set '{name}'")

    def to_dict(self) -> dict:
        return {name: getattr(self, name) for name in self.FIELDS}

    @classmethod
    def from_dict(cls, data: dict) -> "Transaction":
        """Build from decoded wire fields; unknown keys are ignored."""
        return cls(**{name: data[name] for name in cls.FIELDS})

    def to_bytes(self) -> bytes:
        """Deterministic JSON encoding of the transaction fields."""
        return json.dumps(self.to_dict(), sort_keys=True).encode("utf-8")

    def hash(self) -> str:
        """Hex SHA-256 of the transaction, used as its id."""
        return sha256(self.to_bytes(), encoder=HexEncoder).decode()

    def __eq__(self, other):
        if not isinstance(other, Transaction):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self):
        return hash((self.sender, self.receiver, self.amount, self.nonce))

    def __repr__(self):
        return f"Transaction({self.sender} -> {self.receiver}, amount={self.amount}, nonce={self.nonce})"
