import logging

from miniledger import AccountRegistry, Transaction, TransactionRejected, handle_transaction
from miniledger.config import GENESIS_ACCOUNTS, LOG_DATE_FORMAT, LOG_FORMAT

logger = logging.getLogger(__name__)


def submit(registry, tx):
    """Submit one transaction and log the outcome."""
    logger.info("Processing %r", tx)
    try:
        handle_transaction(tx, registry)
    except TransactionRejected as e:
        logger.info("  -> rejected: %s", e.code)
        return False

    logger.info("  -> accepted, sender %s, receiver %s",
                registry.snapshot(tx.sender), registry.snapshot(tx.receiver))
    return True


def run_demo(registry=None):
    """Walk through a valid transfer and the common rejection cases."""
    if registry is None:
        registry = AccountRegistry()
        for account_id, balance in GENESIS_ACCOUNTS.items():
            registry.create_account(account_id, balance)

    logger.info("Initial accounts: %s", registry.snapshot())

    alice_nonce = registry.snapshot("Alice")["nonce"]

    logger.info("[1] Alice sends 4 coins to Bob")
    tx1 = Transaction(sender="Alice", receiver="Bob", amount=4, nonce=alice_nonce)
    submit(registry, tx1)

    logger.info("[2] Replay of the same transaction")
    submit(registry, tx1)

    logger.info("[3] Bob sends his whole balance to Carol (new account)")
    bob = registry.snapshot("Bob")
    submit(registry, Transaction(sender="Bob", receiver="Carol", amount=bob["balance"], nonce=bob["nonce"]))

    logger.info("[4] Carol tries to overspend")
    submit(registry, Transaction(sender="Carol", receiver="Alice", amount=10_000, nonce=0))

    logger.info("[5] Dave (unknown) tries to send")
    submit(registry, Transaction(sender="Dave", receiver="Alice", amount=1, nonce=0))

    logger.info("Final accounts: %s", registry.snapshot())
    return registry


def main():
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    run_demo()


if __name__ == "__main__":
    main()
