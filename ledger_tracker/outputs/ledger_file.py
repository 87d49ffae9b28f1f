# ledger_tracker/outputs/ledger_file.py

import logging

from ledger_tracker.core.errors import FileAccessError, ValidationError
from ledger_tracker.loaders.ledger_file import DELIMITER
from ledger_tracker.parsing import format_date

logger = logging.getLogger(__name__)


def format_transaction(tx):
    """Render one transaction as a ledger line (without the line break)."""
    if DELIMITER in tx.category or "\n" in tx.category or "\r" in tx.category:
        raise ValidationError(
            f"Category '{tx.category}' cannot be written: it contains a comma or line break"
        )
    return DELIMITER.join([
        format_date(tx.date),
        tx.kind.value,
        tx.category,
        str(tx.amount),
    ])


def write_transactions(transactions, path, encoding="utf-8"):
    """
    Write transactions to path in ledger format, one per line, replacing
    any existing file. Returns the number of lines written.
    """
    # Render and encode first so a bad category leaves the target untouched
    lines = [format_transaction(tx) for tx in transactions]
    try:
        data = "".join(line + "\n" for line in lines).encode(encoding)
    except UnicodeEncodeError as e:
        raise ValidationError(
            f"Cannot write '{e.object[e.start:e.end]}' in {encoding}: category has unencodable text"
        ) from e
    except LookupError as e:
        raise ValidationError(f"Unknown encoding '{encoding}'") from e
    try:
        with open(path, 'wb') as f:
            f.write(data)
    except OSError as e:
        raise FileAccessError(path, e.strerror or str(e)) from e

    logger.info("Wrote %d transaction(s) to %s", len(lines), path)
    return len(lines)
