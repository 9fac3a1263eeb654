import threading
import unittest

from miniledger import AccountRegistry, Transaction, TransactionError, TransactionRejected, handle_transaction


def run_concurrently(registry, transactions):
    """Submit every transaction from its own thread, released at once."""
    barrier = threading.Barrier(len(transactions))
    results = [None] * len(transactions)

    def worker(i, tx):
        barrier.wait()
        try:
            handle_transaction(tx, registry)
            results[i] = "ok"
        except TransactionRejected as e:
            results[i] = e.error

    threads = [threading.Thread(target=worker, args=(i, tx)) for i, tx in enumerate(transactions)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    return results


class TestConcurrentSubmission(unittest.TestCase):
    def test_same_nonce_only_one_wins(self):
        """Alice{200,0} sends to Bob and Carol with the same nonce at once."""
        registry = AccountRegistry()
        registry.create_account("Alice", 200)

        results = run_concurrently(registry, [
            Transaction("Alice", "Bob", 100, 0),
            Transaction("Alice", "Carol", 100, 0),
        ])

        self.assertEqual(results.count("ok"), 1)
        self.assertEqual(results.count(TransactionError.INVALID_NONCE), 1)
        alice = registry.snapshot("Alice")
        self.assertEqual(alice["balance"], 100)
        self.assertEqual(alice["nonce"], 1)

        credited = [registry.snapshot(name) for name in ("Bob", "Carol")]
        credited = [acc["balance"] for acc in credited if acc is not None]
        self.assertEqual(credited, [100])

    def test_many_racers_one_deduction(self):
        registry = AccountRegistry()
        registry.create_account("Alice", 1000)

        txs = [Transaction("Alice", f"user{i}", 10, 0) for i in range(16)]
        results = run_concurrently(registry, txs)

        self.assertEqual(results.count("ok"), 1)
        self.assertEqual(registry.snapshot("Alice"), {"account_id": "Alice", "balance": 990, "nonce": 1})

    def test_funds_conserved_under_contention(self):
        names = ["A", "B", "C", "D"]
        registry = AccountRegistry()
        for name in names:
            registry.create_account(name, 1000)

        def spender(name):
            # Each sender walks its own nonce sequence while others transfer to it
            for i in range(50):
                receiver = names[(names.index(name) + 1 + i % 3) % len(names)]
                with registry.locked():
                    nonce = registry.get(name).nonce
                try:
                    handle_transaction(Transaction(name, receiver, 7, nonce), registry)
                except TransactionRejected:
                    pass

        threads = [threading.Thread(target=spender, args=(name,)) for name in names]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        final = registry.snapshot()
        self.assertEqual(sum(acc["balance"] for acc in final.values()), 4000)
        for acc in final.values():
            self.assertGreaterEqual(acc["balance"], 0)
            self.assertEqual(acc["nonce"], 50)


if __name__ == '__main__':
    unittest.main()
