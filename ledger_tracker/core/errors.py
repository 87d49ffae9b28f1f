# ledger_tracker/core/errors.py


class LedgerError(Exception):
    """Base class for every error the ledger reports to the user."""


class FileAccessError(LedgerError):
    """A ledger file is missing, unreadable or unwritable."""

    def __init__(self, path, reason):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Cannot access file {self.path}: {reason}")


class ParseError(LedgerError):
    """A date, kind or amount could not be parsed.

    ``path`` and ``line_number`` are set when the value came from a ledger
    file rather than from a prompt.
    """

    def __init__(self, message, path=None, line_number=None):
        self.path = str(path) if path is not None else None
        self.line_number = line_number
        if self.path is not None and line_number is not None:
            message = f"{self.path}, line {line_number}: {message}"
        super().__init__(message)


class ValidationError(LedgerError):
    """A value parsed but is outside what the ledger accepts."""
