import unittest

from miniledger import Account, AccountRegistry
from miniledger.config import MAX_UINT64


class TestAccountRegistry(unittest.TestCase):
    def setUp(self):
        self.registry = AccountRegistry()

    def test_get_does_not_create(self):
        with self.registry.locked():
            self.assertIsNone(self.registry.get("Alice"))
        self.assertEqual(len(self.registry), 0)

    def test_get_or_create_inserts_empty_account(self):
        with self.registry.locked():
            account = self.registry.get_or_create("Bob")
            again = self.registry.get_or_create("Bob")
        self.assertIs(account, again)
        self.assertEqual(account, Account("Bob", balance=0, nonce=0))
        self.assertIn("Bob", self.registry)
        self.assertEqual(len(self.registry), 1)

    def test_create_account_seeds_balance(self):
        self.registry.create_account("Alice", 500)
        self.assertEqual(self.registry.snapshot("Alice"), {"account_id": "Alice", "balance": 500, "nonce": 0})

    def test_create_account_rejects_duplicates(self):
        self.registry.create_account("Alice", 500)
        with self.assertRaises(ValueError):
            self.registry.create_account("Alice", 10)
        self.assertEqual(self.registry.snapshot("Alice")["balance"], 500)

    def test_create_account_rejects_negative_balance(self):
        with self.assertRaises(ValueError):
            self.registry.create_account("Alice", -1)
        self.assertNotIn("Alice", self.registry)

    def test_create_account_rejects_balance_above_uint64(self):
        with self.assertRaises(ValueError):
            self.registry.create_account("Alice", MAX_UINT64 + 1)
        self.registry.create_account("Bob", MAX_UINT64)
        self.assertEqual(self.registry.snapshot("Bob")["balance"], MAX_UINT64)

    def test_snapshot_is_a_copy(self):
        self.registry.create_account("Alice", 500)
        snap = self.registry.snapshot()
        snap["Alice"]["balance"] = 0
        self.assertEqual(self.registry.snapshot("Alice")["balance"], 500)
        self.assertIsNone(self.registry.snapshot("Nobody"))


if __name__ == '__main__':
    unittest.main()
