# ledger_tracker/core/summary.py
from decimal import Decimal
from typing import Iterable

from ledger_tracker.core.models import MonthlySummary, Transaction, TransactionKind
from ledger_tracker.utils import filter_transactions_by_month


def summarize_month(transactions: Iterable[Transaction], year: int, month: int) -> MonthlySummary:
    """
    Single pass over ``transactions`` accumulating income and expense totals,
    overall and per category, for one calendar month.
    """
    summary = MonthlySummary(year=year, month=month)
    for tx in filter_transactions_by_month(transactions, year, month):
        if tx.kind is TransactionKind.INCOME:
            summary.total_income += tx.amount
            by_cat = summary.income_by_category
        else:
            summary.total_expense += tx.amount
            by_cat = summary.expense_by_category
        by_cat[tx.category] = by_cat.get(tx.category, Decimal("0")) + tx.amount
    return summary


class SummaryEngine:
    """Read-only monthly aggregation over a TransactionStore."""

    def __init__(self, store):
        self.store = store

    def summarize(self, year: int, month: int) -> MonthlySummary:
        return summarize_month(self.store.all(), year, month)
