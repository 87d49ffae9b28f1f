# ledger_tracker/outputs/console.py
from ledger_tracker.utils import format_currency

INDENT = "  "


def render_summary(summary, symbol="₹"):
    """Return the display lines for a MonthlySummary."""
    def money(amount):
        return format_currency(amount, symbol)

    lines = [f"--- Monthly Summary for {summary.label} ---"]
    lines.append(f"Total Income: {money(summary.total_income)}")
    for cat, total in summary.income_by_category.items():
        lines.append(f"{INDENT}{cat}: {money(total)}")
    lines.append(f"Total Expenses: {money(summary.total_expense)}")
    for cat, total in summary.expense_by_category.items():
        lines.append(f"{INDENT}{cat}: {money(total)}")
    lines.append(f"Net Savings: {money(summary.net_savings)}")
    return lines
