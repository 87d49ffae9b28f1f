# ledger_tracker/core/models.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Dict


class TransactionKind(Enum):
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


@dataclass(frozen=True)
class Transaction:
    date: date
    kind: TransactionKind
    category: str
    amount: Decimal  # magnitude; the effect comes from ``kind``


@dataclass
class MonthlySummary:
    year: int
    month: int
    total_income: Decimal = Decimal("0")
    total_expense: Decimal = Decimal("0")
    income_by_category: Dict[str, Decimal] = field(default_factory=dict)
    expense_by_category: Dict[str, Decimal] = field(default_factory=dict)

    @property
    def net_savings(self) -> Decimal:
        return self.total_income - self.total_expense

    @property
    def label(self) -> str:
        return f"{self.year}-{self.month:02d}"
