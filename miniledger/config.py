"""
config.py - MiniLedger configuration constants.
Defaults for the server; the CLI can override them.
"""

# HTTP server
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000

# Largest amount or nonce accepted over the wire (unsigned 64-bit)
MAX_UINT64 = 2 ** 64 - 1

# Accounts seeded at startup when no --genesis flag is given
GENESIS_ACCOUNTS = {
    "Alice": 100,
    "Bob": 50,
}

# Log format shared by the CLI and the demo driver
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
