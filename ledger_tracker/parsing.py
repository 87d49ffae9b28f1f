# ledger_tracker/parsing.py
"""
Field parsers shared by the file loader and the interactive shell.

Each parser returns a ``ParseResult`` instead of raising: callers check
``result.error`` before touching the store.
"""
from __future__ import annotations

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, NamedTuple, Optional

from ledger_tracker.core.errors import LedgerError, ParseError, ValidationError
from ledger_tracker.core.models import TransactionKind

DATE_FORMAT = "%Y-%m-%d"

_DATE_RX = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_INT_RX = re.compile(r"^[+-]?\d+$")
_AMOUNT_RX = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


class ParseResult(NamedTuple):
    value: Any = None
    error: Optional[LedgerError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_date(text: str) -> ParseResult:
    raw = (text or "").strip()
    if not _DATE_RX.match(raw):
        return ParseResult(error=ParseError(f"Invalid date '{raw}', expected YYYY-MM-DD"))
    try:
        d = datetime.strptime(raw, DATE_FORMAT).date()
    except ValueError as e:
        return ParseResult(error=ParseError(f"Invalid date '{raw}': {e}"))
    return ParseResult(d)


def parse_kind(text: str) -> ParseResult:
    raw = (text or "").strip()
    try:
        return ParseResult(TransactionKind[raw.upper()])
    except KeyError:
        return ParseResult(error=ParseError(f"Unknown transaction type '{raw}'"))


def parse_amount(text: str) -> ParseResult:
    """Parse a plain decimal numeral. The sign is not checked."""
    raw = (text or "").strip()
    if not _AMOUNT_RX.match(raw):
        return ParseResult(error=ParseError(f"Invalid amount '{raw}'"))
    try:
        amount = Decimal(raw)
    except InvalidOperation:
        return ParseResult(error=ParseError(f"Invalid amount '{raw}'"))
    if not amount.is_finite():
        return ParseResult(error=ParseError(f"Invalid amount '{raw}'"))
    return ParseResult(amount)


def parse_year(text: str) -> ParseResult:
    raw = (text or "").strip()
    if not _INT_RX.match(raw):
        return ParseResult(error=ValidationError(f"Invalid year '{raw}'"))
    return ParseResult(int(raw))


def parse_month(text: str) -> ParseResult:
    raw = (text or "").strip()
    if not _INT_RX.match(raw):
        return ParseResult(error=ValidationError(f"Invalid month '{raw}'"))
    month = int(raw)
    if month < 1 or month > 12:
        return ParseResult(error=ValidationError("Month must be between 1 and 12."))
    return ParseResult(month)


def parse_year_month(text: str) -> ParseResult:
    """Parse ``YYYY-MM`` into a ``(year, month)`` tuple."""
    raw = (text or "").strip()
    year_s, sep, month_s = raw.partition("-")
    if not sep:
        return ParseResult(error=ValidationError(f"Invalid month '{raw}', expected YYYY-MM"))
    year = parse_year(year_s)
    if not year.ok:
        return year
    month = parse_month(month_s)
    if not month.ok:
        return month
    return ParseResult((year.value, month.value))


def format_date(d: date) -> str:
    return d.isoformat()
