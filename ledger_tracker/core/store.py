# ledger_tracker/core/store.py
from typing import Iterator, List, Tuple

from ledger_tracker.core.models import Transaction


class TransactionStore:
    """
    Ordered, append-only collection of transactions for one session.
    Duplicates are kept; a transaction is identified only by its position.
    """

    def __init__(self):
        self._transactions: List[Transaction] = []

    def add(self, transaction: Transaction) -> None:
        self._transactions.append(transaction)

    def all(self) -> Tuple[Transaction, ...]:
        return tuple(self._transactions)

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self.all())
