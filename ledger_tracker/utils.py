# ledger_tracker/utils.py
from decimal import Decimal


def filter_transactions_by_month(transactions, year, month):
    """
    Return only those transactions whose date falls in the given year and month.
    """
    return [tx for tx in transactions if tx.date.year == year and tx.date.month == month]


def format_currency(amount: Decimal, symbol: str = "₹") -> str:
    """Format an amount as a currency string, e.g. '₹1,234.56'."""
    return f"{symbol}{amount:,.2f}"
