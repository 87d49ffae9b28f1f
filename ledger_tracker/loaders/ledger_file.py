# ledger_tracker/loaders/ledger_file.py
import logging

from ledger_tracker.core.errors import FileAccessError, ParseError, ValidationError
from ledger_tracker.core.models import Transaction
from ledger_tracker.loaders.base import BaseLoader, LoadResult
from ledger_tracker.parsing import ParseResult, parse_amount, parse_date, parse_kind

logger = logging.getLogger(__name__)

DELIMITER = ","
FIELD_COUNT = 4

ABORT = "abort"
SKIP = "skip"
POLICIES = (ABORT, SKIP)


def parse_fields(fields, file_path=None, line_number=None) -> ParseResult:
    """Build a Transaction from the four fields of one ledger line."""
    raw_date, raw_kind, category, raw_amount = fields
    d, kind, amount = parse_date(raw_date), parse_kind(raw_kind), parse_amount(raw_amount)
    for result in (d, kind, amount):
        if not result.ok:
            return ParseResult(error=ParseError(str(result.error), file_path, line_number))
    return ParseResult(Transaction(
        date=d.value,
        kind=kind.value,
        category=category.strip(),
        amount=amount.value,
    ))


class LedgerFileLoader(BaseLoader):
    """
    Loader for plain-text ledger files, one record per line:

        YYYY-MM-DD,<INCOME|EXPENSE>,<category>,<amount>

    Lines that do not split into exactly four comma-separated fields are
    skipped without being reported. A four-field line whose date, kind or
    amount does not parse is a ParseError; with the ``abort`` policy the rest
    of the file is left unread, with ``skip`` only that line is dropped.
    Transactions parsed before an abort stay in the store.
    """

    def __init__(self, store, on_parse_error=ABORT, encoding="utf-8"):
        super().__init__(store)
        if on_parse_error not in POLICIES:
            raise ValidationError(
                f"Unsupported on_parse_error '{on_parse_error}', expected one of {POLICIES}"
            )
        self.on_parse_error = on_parse_error
        self.encoding = encoding

    def load(self, file_path) -> LoadResult:
        count = 0
        errors = []
        try:
            with open(file_path, encoding=self.encoding) as f:
                for line_number, line in enumerate(f, start=1):
                    fields = line.rstrip("\r\n").split(DELIMITER)
                    if len(fields) != FIELD_COUNT:
                        logger.debug("Skipping %s line %d: %d field(s)",
                                     file_path, line_number, len(fields))
                        continue

                    result = parse_fields(fields, file_path, line_number)
                    if not result.ok:
                        logger.warning("%s", result.error)
                        errors.append(result.error)
                        if self.on_parse_error == ABORT:
                            break
                        continue

                    self.store.add(result.value)
                    count += 1
        except (OSError, UnicodeDecodeError, LookupError) as e:
            err = FileAccessError(file_path, getattr(e, "strerror", None) or str(e))
            logger.warning("%s", err)
            errors.append(err)

        logger.info("Loaded %d transaction(s) from %s", count, file_path)
        return LoadResult(count, errors)
