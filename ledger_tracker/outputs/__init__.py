# ledger_tracker/outputs/__init__.py
from ledger_tracker.outputs.console import render_summary
from ledger_tracker.outputs.ledger_file import format_transaction, write_transactions
