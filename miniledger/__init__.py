# Core modules
from .account import Account
from .transaction import Transaction
from .registry import AccountRegistry
from .errors import TransactionError, TransactionRejected

# Engine
from .engine import validate_transaction, execute_transaction, handle_transaction

__all__ = [
    # Core
    "Account",
    "Transaction",
    "AccountRegistry",
    "TransactionError",
    "TransactionRejected",
    # Engine
    "validate_transaction",
    "execute_transaction",
    "handle_transaction",
]
