# ledger_tracker/shell.py
import logging

import click

from ledger_tracker.core.models import Transaction, TransactionKind
from ledger_tracker.core.summary import SummaryEngine
from ledger_tracker.outputs.console import render_summary
from ledger_tracker.parsing import parse_amount, parse_date, parse_month, parse_year

logger = logging.getLogger(__name__)

MENU = (
    "\n--- Expense Tracker Menu ---\n"
    "1. Add Income\n"
    "2. Add Expense\n"
    "3. View Monthly Summary\n"
    "4. Load Transactions from File\n"
    "5. Exit"
)

CATEGORY_HINTS = {
    TransactionKind.INCOME: "income category (e.g., Salary, Business)",
    TransactionKind.EXPENSE: "expense category (e.g., Food, Rent, Travel)",
}


class InteractiveShell:
    """
    Menu-driven console front end over a TransactionStore.

    Every prompt is validated before the store is touched, so an action that
    fails on bad input leaves the ledger exactly as it was.
    """

    def __init__(self, store, loader, currency_symbol="₹"):
        self.store = store
        self.loader = loader
        self.engine = SummaryEngine(store)
        self.currency_symbol = currency_symbol
        self.actions = {
            "1": lambda: self.add_transaction(TransactionKind.INCOME),
            "2": lambda: self.add_transaction(TransactionKind.EXPENSE),
            "3": self.show_summary,
            "4": self.load_file,
        }

    def run(self):
        try:
            while True:
                click.echo(MENU)
                choice = self._ask("Choose an option (1-5)").strip()
                if choice == "5":
                    break
                action = self.actions.get(choice)
                if action is None:
                    click.echo("Invalid option. Please choose between 1 and 5.")
                    continue
                action()
        except click.Abort:
            # end of input
            click.echo()
        click.echo("Exiting Expense Tracker. Goodbye!")

    def _ask(self, text):
        return click.prompt(text, default="", show_default=False)

    def add_transaction(self, kind):
        d = parse_date(self._ask("Enter date (YYYY-MM-DD)"))
        if not d.ok:
            click.echo(f"Invalid date format. {d.error}")
            return
        category = self._ask(f"Enter {CATEGORY_HINTS[kind]}").strip()
        amount = parse_amount(self._ask("Enter amount"))
        if not amount.ok:
            click.echo(f"Invalid amount. {amount.error}")
            return

        self.store.add(Transaction(date=d.value, kind=kind, category=category, amount=amount.value))
        logger.debug("Added %s %s %s on %s", kind.value, category, amount.value, d.value)
        click.echo(f"{kind.value.capitalize()} added successfully.")

    def show_summary(self):
        year = parse_year(self._ask("Enter year (e.g., 2025)"))
        if not year.ok:
            click.echo(str(year.error))
            return
        month = parse_month(self._ask("Enter month (1-12)"))
        if not month.ok:
            click.echo(str(month.error))
            return

        summary = self.engine.summarize(year.value, month.value)
        click.echo()
        for line in render_summary(summary, self.currency_symbol):
            click.echo(line)

    def load_file(self):
        path = self._ask("Enter filename to load transactions from").strip()
        if not path:
            click.echo("No filename given.")
            return
        report_load(path, self.loader.load(path))


def report_load(path, result):
    """Echo the outcome of a loader run to the console."""
    for err in result.errors:
        click.echo(f"Error: {err}", err=True)
    if not (result.errors and result.count == 0):
        click.echo(f"Loaded {result.count} transaction(s) from {path}.")
    return result
