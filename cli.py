#!/usr/bin/env python3
"""
MiniLedger Server CLI

Command-line interface for running a MiniLedger HTTP server.

Usage:
    # Start with the default genesis accounts
    python cli.py --port 8000

    # Seed custom accounts
    python cli.py --genesis Alice:500,Bob:0

    # Verbose logging
    python cli.py --debug
"""

import argparse
import logging

import uvicorn

from miniledger import AccountRegistry
from miniledger.api import create_app
from miniledger.config import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    GENESIS_ACCOUNTS,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    MAX_UINT64,
)

logger = logging.getLogger(__name__)


def parse_genesis(value: str) -> dict:
    """Parse 'name:balance,name:balance' into a dict."""
    accounts = {}
    for entry in value.split(","):
        entry = entry.strip()
        if not entry:
            continue
        name, sep, balance = entry.rpartition(":")
        if not sep or not name:
            raise argparse.ArgumentTypeError(f"Invalid genesis entry '{entry}', expected name:balance")
        try:
            amount = int(balance)
        except ValueError:
            raise argparse.ArgumentTypeError(f"Invalid balance in genesis entry '{entry}'")
        if amount < 0:
            raise argparse.ArgumentTypeError(f"Negative balance in genesis entry '{entry}'")
        if amount > MAX_UINT64:
            raise argparse.ArgumentTypeError(f"Balance above {MAX_UINT64} in genesis entry '{entry}'")
        if name in accounts:
            raise argparse.ArgumentTypeError(f"Duplicate genesis account '{name}'")
        accounts[name] = amount
    return accounts


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="MiniLedger HTTP Server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python cli.py --port 8000                     # Start with default accounts
  python cli.py --genesis Alice:500,Bob:0       # Seed custom accounts
        """
    )

    parser.add_argument(
        "--host",
        type=str,
        default=DEFAULT_HOST,
        help=f"Interface to bind (default: {DEFAULT_HOST})"
    )

    parser.add_argument(
        "--port", "-p",
        type=int,
        default=DEFAULT_PORT,
        help=f"Port to listen on (default: {DEFAULT_PORT})"
    )

    parser.add_argument(
        "--genesis",
        type=parse_genesis,
        default=None,
        help="Comma-separated starting balances (e.g., Alice:500,Bob:50)"
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    return parser.parse_args(argv)


def build_registry(genesis: dict) -> AccountRegistry:
    """Create a registry seeded with the given balances."""
    registry = AccountRegistry()
    for account_id, balance in genesis.items():
        registry.create_account(account_id, balance)
    return registry


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    level = logging.DEBUG if args.debug else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    genesis = args.genesis if args.genesis is not None else GENESIS_ACCOUNTS
    registry = build_registry(genesis)

    print(f"""
╔══════════════════════════════════════════════╗
║            MiniLedger Server                 ║
╚══════════════════════════════════════════════╝
  Listening: http://{args.host}:{args.port}
  Accounts: {', '.join(f'{k}={v}' for k, v in genesis.items()) or 'None'}
""")

    app = create_app(registry)
    uvicorn.run(app, host=args.host, port=args.port, log_level=logging.getLevelName(level).lower())


if __name__ == "__main__":
    main()
