# ledger_tracker/loaders/base.py
from abc import ABC, abstractmethod
from typing import List, NamedTuple

from ledger_tracker.core.errors import LedgerError


class LoadResult(NamedTuple):
    count: int
    errors: List[LedgerError]


class BaseLoader(ABC):
    def __init__(self, store):
        self.store = store

    @abstractmethod
    def load(self, file_path) -> LoadResult:
        """
        Append the transactions found in file_path to the store and report
        how many were added along with any errors met on the way.
        """
        pass
