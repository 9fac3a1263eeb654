"""
engine.py - Transaction validation and state transition for MiniLedger.

The engine works on Account objects handed to it by the caller and never
touches the registry's storage. `handle_transaction` is the entry point
used by transports: it runs lookup, validation and execution under one
acquisition of the registry lock.
"""

import logging
from typing import Optional

from miniledger.account import Account
from miniledger.errors import TransactionError, TransactionRejected
from miniledger.registry import AccountRegistry
from miniledger.transaction import Transaction

logger = logging.getLogger(__name__)


def validate_transaction(tx: Transaction, sender_account: Optional[Account]) -> None:
    """
    Check that a transaction is admissible against the sender's state.
    Checks run in a fixed order and the first failure is raised as
    TransactionRejected. Receiver existence is not checked.
    """
    if tx.amount <= 0:
        raise TransactionRejected(
            TransactionError.AMOUNT_IS_ZERO,
            "Amount must be greater than zero",
        )

    if tx.sender == tx.receiver:
        raise TransactionRejected(
            TransactionError.SENDER_IS_RECEIVER,
            f"Sender {tx.sender} cannot be the receiver",
        )

    if sender_account is None:
        raise TransactionRejected(
            TransactionError.ACCOUNT_NOT_FOUND,
            f"Sender account {tx.sender} not found",
        )

    if sender_account.balance < tx.amount:
        raise TransactionRejected(
            TransactionError.INSUFFICIENT_FUNDS,
            f"Insufficient funds: balance {sender_account.balance}, amount {tx.amount}",
        )

    # Replay protection: gaps and reuse are rejected alike
    if tx.nonce != sender_account.nonce:
        raise TransactionRejected(
            TransactionError.INVALID_NONCE,
            f"Bad nonce: expected {sender_account.nonce}, got {tx.nonce}",
        )


def execute_transaction(tx: Transaction, sender_account: Account, receiver_account: Account) -> None:
    """
    Move funds from sender to receiver and bump the sender's nonce.
    Must only be called on a transaction that passed validation.
    """
    sender_balance = sender_account.balance - tx.amount
    receiver_balance = receiver_account.balance + tx.amount
    sender_nonce = sender_account.nonce + 1

    sender_account.balance = sender_balance
    receiver_account.balance = receiver_balance
    sender_account.nonce = sender_nonce


def handle_transaction(tx: Transaction, registry: AccountRegistry) -> None:
    """
    Validate and apply a transaction against the registry.
    Raises TransactionRejected if it is invalid; the registry is left
    untouched in that case, including no receiver being created.
    """
    try:
        with registry.locked():
            sender_account = registry.get(tx.sender)
            validate_transaction(tx, sender_account)
            receiver_account = registry.get_or_create(tx.receiver)
            execute_transaction(tx, sender_account, receiver_account)
    except TransactionRejected as e:
        logger.warning("Rejected tx %s: %s (%s)", tx.hash()[:16], e.code, e.message)
        raise

    logger.info("Applied tx %s: %s -> %s, %d", tx.hash()[:16], tx.sender, tx.receiver, tx.amount)
