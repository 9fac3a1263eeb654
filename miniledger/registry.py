"""
registry.py - Shared account registry for MiniLedger.
Owns every Account and serializes access through a single lock.
"""

from contextlib import contextmanager
from typing import Dict, Optional
import logging
import threading

from miniledger.account import Account
from miniledger.config import MAX_UINT64

logger = logging.getLogger(__name__)


class AccountRegistry:
    """
    In-memory store of all accounts, keyed by account id.

    Callers wrap a whole lookup-validate-execute sequence in `locked()`;
    `get` and `get_or_create` do not lock on their own and must only be
    called while the lock is held. Account objects returned by them must
    not be kept past the end of the `with` block.

    The remaining helpers take the lock themselves, so they must not be
    called from inside `locked()` (the lock is not reentrant).
    """

    def __init__(self):
        self._accounts: Dict[str, Account] = {}
        self._lock = threading.Lock()

    @contextmanager
    def locked(self):
        """Hold the registry lock for the duration of the block."""
        with self._lock:
            yield self

    # =========================================================================
    # LOOKUP (caller holds the lock)
    # =========================================================================

    def get(self, account_id: str) -> Optional[Account]:
        """Return the account, or None if it doesn't exist."""
        return self._accounts.get(account_id)

    def get_or_create(self, account_id: str) -> Account:
        """Return the account, inserting a zero-balance one if missing."""
        account = self._accounts.get(account_id)
        if account is None:
            account = Account(account_id)
            self._accounts[account_id] = account
        return account

    # =========================================================================
    # SELF-LOCKING HELPERS
    # =========================================================================

    def create_account(self, account_id: str, balance: int = 0) -> Account:
        """Seed a new account with a starting balance."""
        if not isinstance(balance, int) or isinstance(balance, bool) or not 0 <= balance <= MAX_UINT64:
            raise ValueError(f"Invalid starting balance for {account_id}: {balance!r}")

        with self._lock:
            if account_id in self._accounts:
                raise ValueError(f"Account {account_id} already exists")
            account = Account(account_id, balance=balance)
            self._accounts[account_id] = account

        logger.info("Registry: created account %s with balance %d", account_id, balance)
        return account

    def snapshot(self, account_id: str = None):
        """
        Copy account state out of the registry.
        Returns a single account dict (or None) when `account_id` is given,
        otherwise a dict of every account keyed by id.
        """
        with self._lock:
            if account_id is not None:
                account = self._accounts.get(account_id)
                return account.to_dict() if account else None
            return {aid: acc.to_dict() for aid, acc in self._accounts.items()}

    def __contains__(self, account_id) -> bool:
        with self._lock:
            return account_id in self._accounts

    def __len__(self) -> int:
        with self._lock:
            return len(self._accounts)
